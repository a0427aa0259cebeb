def __getattr__(name: str):
    if name in {"configure_logging", "get_logger", "Logger", "Level"}:
        from hooklog import logging as hooklog_logging

        return getattr(hooklog_logging, name)
    raise AttributeError(f"module 'hooklog' has no attribute {name}")


__all__ = ["configure_logging", "get_logger", "Logger", "Level"]
