import math
import numbers
import re
from decimal import Decimal
from enum import Enum


# Возможные результаты классификации треугольника
class Label(str, Enum):
    INVALID_ARGS = "The arguments were not valid"
    NOT_A_TRIANGLE = "Not a valid triangle"
    EQUILATERAL = "Equilateral"
    ISOSCELES = "Isosceles"
    SCALENE = "Scalene"

    def __str__(self):
        return self.value

    @property
    def is_triangle(self) -> bool:
        """Метка описывает форму треугольника, а не ошибку во входных данных"""
        return self in (Label.EQUILATERAL, Label.ISOSCELES, Label.SCALENE)


INVALID_ARGS = Label.INVALID_ARGS
NOT_A_TRIANGLE = Label.NOT_A_TRIANGLE
EQUILATERAL = Label.EQUILATERAL
ISOSCELES = Label.ISOSCELES
SCALENE = Label.SCALENE


# Объявление для случаев некорректных сторон треугольника
class IncorrectTriangleSides(Exception):
    label = Label.INVALID_ARGS


# Сторона не является положительным числом
class InvalidArguments(IncorrectTriangleSides):
    pass


# Стороны не удовлетворяют неравенству треугольника
class NotATriangle(IncorrectTriangleSides):
    label = Label.NOT_A_TRIANGLE


# Десятичное число целиком: "2", "-1", "2.5", ".5", "1e3", "Infinity"
_NUMBER = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def parse_side(value) -> float:
    """Преобразует длину стороны (число или строку с числом) во float.

    Сначала проверяется само значение: bool, None, пустая строка и строки
    вроде "5abc" числами не считаются. NaN тоже отклоняется.
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal, str)):
        raise InvalidArguments(f"Side is not a number: {value!r}")

    if isinstance(value, str):
        text = value.strip()
        if not _NUMBER.fullmatch(text):
            raise InvalidArguments(f"Side is not a number: {value!r}")
        value = text

    # Decimal("NaN") и Decimal("sNaN")
    if isinstance(value, Decimal) and value.is_nan():
        raise InvalidArguments(f"Side is not a number: {value!r}")

    try:
        side = float(value)
    except OverflowError:
        # Слишком большое целое
        side = math.inf if value > 0 else -math.inf

    if math.isnan(side):
        raise InvalidArguments(f"Side is not a number: {value!r}")
    return side


def validate_sides(a, b, c):
    # Все три стороны разбираются до проверки на положительность
    a, b, c = (parse_side(side) for side in (a, b, c))
    # Проверка на положительность всех сторон треугольника
    if a <= 0 or b <= 0 or c <= 0:
        raise InvalidArguments("Side lengths must be positive")
    # Проверка: сумма двух сторон должна быть больше третьей стороны
    if b + c <= a or a + c <= b or a + b <= c:
        raise NotATriangle("Invalid side lengths for a triangle")
    return a, b, c


def shape_of(a: float, b: float, c: float) -> Label:
    # Сравнение точное, без допуска
    if a == b == c:
        return Label.EQUILATERAL
    elif a == b or a == c or b == c:
        return Label.ISOSCELES
    else:
        return Label.SCALENE


# Функция для определения типа треугольника на основе длин его сторон
def classify(side_a, side_b, side_c) -> Label:
    try:
        a, b, c = validate_sides(side_a, side_b, side_c)
    except IncorrectTriangleSides as error:
        return error.label
    return shape_of(a, b, c)
