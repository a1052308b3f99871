from barustenberg.scalar_multiplication import (
    FQ_MODULUS,
    AffinePoint,
    ProjectivePoint,
    cube_root_of_unity,
    generate_pippenger_point_table,
    is_point_at_infinity,
)

GENERATOR = AffinePoint(1, 2)


def _on_curve(point):
    return (point.y * point.y - point.x ** 3 - 3) % FQ_MODULUS == 0


def test_cube_root_is_nontrivial_cube_root():
    beta = cube_root_of_unity()
    assert beta != 1
    assert pow(beta, 3, FQ_MODULUS) == 1


def test_cube_root_satisfies_minimal_polynomial():
    beta = cube_root_of_unity()
    assert (beta * beta + beta + 1) % FQ_MODULUS == 0


def test_coordinates_are_reduced():
    point = AffinePoint(FQ_MODULUS + 1, -2)
    assert point.x == 1
    assert point.y == FQ_MODULUS - 2


def test_point_at_infinity():
    assert is_point_at_infinity(ProjectivePoint(1, 2, 0)) is True


def test_all_zero_is_not_infinity():
    assert is_point_at_infinity(ProjectivePoint(0, 0, 0)) is False


def test_finite_point_is_not_infinity():
    assert is_point_at_infinity(ProjectivePoint(1, 2, 1)) is False


def test_table_layout():
    second = AffinePoint(GENERATOR.x, FQ_MODULUS - GENERATOR.y)
    table = generate_pippenger_point_table([GENERATOR, second])
    assert len(table) == 4
    assert table[0] == GENERATOR
    assert table[2] == second
    beta = cube_root_of_unity()
    assert table[1].x == beta * GENERATOR.x % FQ_MODULUS
    assert table[1].y == FQ_MODULUS - GENERATOR.y
    assert table[3].y == GENERATOR.y


def test_endomorphism_points_stay_on_curve():
    table = generate_pippenger_point_table([GENERATOR])
    assert len(table) == 2
    assert table[0] == GENERATOR
    endo = table[1]
    assert endo.x != GENERATOR.x
    assert (endo.y * endo.y - endo.x ** 3 - 3) % FQ_MODULUS == 0
    assert _on_curve(table[0]) is True


def test_empty_table():
    assert generate_pippenger_point_table([]) == []