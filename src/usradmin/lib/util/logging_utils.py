"""Utility functions for logging."""


def log_debug(message: str) -> None:
    """Append a simple debug line to the usradmin log.

    Writes timestamped lines to ``state_root()/usradmin.log`` unless the
    global config sets ``log.debug: false``.  Fully exception-safe: an
    unreadable or malformed config and any IO error are ignored, so this
    function never raises or affects command dispatch.
    """
    try:
        import time

        from ..core.config import debug_log_enabled, state_root

        if not debug_log_enabled():
            return
        log_path = state_root() / "usradmin.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
