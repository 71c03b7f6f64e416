from flux_minimal.common.options import DEFAULT_OPTIONS, FluxOptions, make_lock

__all__ = ["DEFAULT_OPTIONS", "FluxOptions", "make_lock"]
