import logging
import os
import sys

from dotenv import load_dotenv

from triangle_func import classify

logger = logging.getLogger(__name__)

USAGE = "Usage: triangle-type A B C"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Уровень логирования из переменной окружения TRIANGLE_LOG_LEVEL
def get_log_level() -> int:
    level_name = os.getenv("TRIANGLE_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(level_name)
    # Для неизвестного имени getLevelName возвращает строку "Level ..."
    if not isinstance(level, int):
        return logging.WARNING
    return level


# Настройка логгера
def setup_logging():
    load_dotenv()
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)


def main(argv=None) -> int:
    setup_logging()

    # Стороны берутся из параметров командной строки, начиная с индекса 1
    args = sys.argv[1:] if argv is None else list(argv)
    # Допускается одна строка вида "3 4 5"
    if len(args) == 1:
        args = args[0].split()

    if len(args) != 3:
        logger.error(f"Expected 3 sides, got {len(args)}: {args}")
        print(USAGE, file=sys.stderr)
        return 2

    label = classify(*args)
    logger.info(f"Sides: {args}, Result: {label}")
    print(label)
    return 0 if label.is_triangle else 1


if __name__ == "__main__":
    sys.exit(main())
