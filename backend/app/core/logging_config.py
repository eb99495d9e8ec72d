"""
Logging setup - 日志配置

Configures the root logger once with a console handler. Safe to call
repeatedly (tests build several apps in one process).
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger if none is attached yet."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if root.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)
