from brickset.jobs.wantlist import format_wanted_list, run_wantlist

__all__ = ["format_wanted_list", "run_wantlist"]
