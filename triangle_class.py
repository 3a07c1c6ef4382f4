from triangle_func import Label, shape_of, validate_sides


class Triangle:
    """Треугольник с проверенными сторонами.

    Конструктор принимает те же значения, что и classify, и выбрасывает
    InvalidArguments или NotATriangle, если стороны некорректны.
    """

    def __init__(self, a, b, c):
        self.a, self.b, self.c = validate_sides(a, b, c)

    @property
    def sides(self):
        return self.a, self.b, self.c

    def triangle_type(self) -> Label:
        return shape_of(self.a, self.b, self.c)

    def perimeter(self) -> float:
        return self.a + self.b + self.c

    def __repr__(self):
        return f"Triangle({self.a!r}, {self.b!r}, {self.c!r})"
