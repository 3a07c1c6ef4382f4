# Импорт класса Triangle из модуля triangle_class
from triangle_class import Triangle
from triangle_func import IncorrectTriangleSides, InvalidArguments, NotATriangle, classify
# Импорт библиотеки pytest для проведения тестирования
import pytest


# Функция для тестирования создания треугольника с некорректными сторонами
def test_triangle_creation():
    # Нулевые стороны
    with pytest.raises(InvalidArguments):
        Triangle(0, 0, 0)

    # Отрицательная сторона
    with pytest.raises(InvalidArguments):
        Triangle(-1, 2, 3)

    # Не число
    with pytest.raises(InvalidArguments):
        Triangle("A", 2, 3)

    # Нарушено неравенство треугольника
    with pytest.raises(NotATriangle):
        Triangle(1, 1, 3)


def test_errors_share_base_class():
    with pytest.raises(IncorrectTriangleSides) as excinfo:
        Triangle(1, 1, 3)
    assert excinfo.value.label == "Not a valid triangle"


# Функция для тестирования методов класса Triangle
def test_triangle_methods():
    triangle1 = Triangle(3, 4, 5)
    assert triangle1.triangle_type() == "Scalene"
    assert triangle1.perimeter() == 12

    triangle2 = Triangle(5, 5, 5)
    assert triangle2.triangle_type() == "Equilateral"
    assert triangle2.perimeter() == 15

    triangle3 = Triangle("7", "7", "10")
    assert triangle3.triangle_type() == "Isosceles"
    assert triangle3.perimeter() == 24


def test_sides_are_floats():
    triangle = Triangle("3", 4, 5.0)
    assert triangle.sides == (3.0, 4.0, 5.0)
    assert repr(triangle) == "Triangle(3.0, 4.0, 5.0)"


@pytest.mark.parametrize("sides", [(2, 2, 2), ("2", "2", "3"), ("3", "5", "3"), ("4", "6", "5")])
def test_matches_classify(sides):
    assert Triangle(*sides).triangle_type() == classify(*sides)


# Проверка, что скрипт запускается напрямую, и запуск всех тестов
if __name__ == "__main__":
    pytest.main()
