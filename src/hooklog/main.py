from hooklog.config import settings
from hooklog.logging import Level, configure_logging


def main() -> None:
    """Emit one record per severity through the configured destination."""
    log = configure_logging(settings.logging)
    log.set_level(Level.DEBUG)

    log.error("error 你好")
    log.warning("warn 你好")
    log.info("info %s", "你好")
    log.debug("debug 你好")

    log.close()


if __name__ == "__main__":
    main()
