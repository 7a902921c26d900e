import pytest

from skyplace.nutation_arguments import argument, multipliers, term_count


def test_term_count_matches_series_length():
    assert term_count() == 194
    assert multipliers(term_count() - 1) == (0, 0, -7, 7, -7, 5, 0, 0, 0)


@pytest.mark.parametrize(
    "index, expected",
    [
        (0, (0, 0, 0, 0, -1, 0, 0, 0, 0)),
        (1, (0, 0, 2, -2, 2, 0, 0, 0, 0)),
        (161, (2, 1, 0, 0, 0, 0, 0, 0, 0)),
        (162, (0, 0, 5, -5, 5, -3, 0, 0, 0)),
        (190, (0, 0, 0, 0, 0, 0, 0, 0, 1)),
        (193, (0, 0, -7, 7, -7, 5, 0, 0, 0)),
    ],
)
def test_multipliers_from_table(index, expected):
    assert multipliers(index) == expected


def test_every_row_has_nine_integers():
    rows = [multipliers(i) for i in range(term_count())]
    assert all(len(row) == 9 and all(isinstance(m, int) for m in row) for row in rows)


@pytest.mark.parametrize("position", range(9))
def test_unit_fundamental_picks_multiplier(position):
    fundamentals = [0.0] * 9
    fundamentals[position] = 1.0
    for index in (0, 50, 162, 186):
        assert argument(index, fundamentals) == multipliers(index)[position]


def test_argument_of_zero_fundamentals_is_zero():
    assert all(argument(i, [0.0] * 9) == 0.0 for i in range(term_count()))


def test_argument_is_linear():
    a = [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9]
    b = [1.5, -0.5, 2.0, 0.25, -1.0, 3.0, 0.5, -2.0, 1.0]
    both = [x + y for x, y in zip(a, b)]
    for index in (3, 77, 172, 191):
        assert argument(index, both) == pytest.approx(
            argument(index, a) + argument(index, b)
        )


def test_argument_of_first_term_is_minus_node():
    assert argument(0, [0.0, 0.0, 0.0, 0.0, 1.25, 0.0, 0.0, 0.0, 0.0]) == -1.25


@pytest.mark.parametrize("index", [-1, 194, 1000])
def test_multipliers_index_out_of_range(index):
    with pytest.raises(IndexError):
        multipliers(index)


@pytest.mark.parametrize("index", [-1, 194])
def test_argument_index_out_of_range(index):
    with pytest.raises(IndexError):
        argument(index, [0.0] * 9)


@pytest.mark.parametrize("count", [0, 5, 8, 10])
def test_argument_wrong_fundamental_count(count):
    with pytest.raises(ValueError, match="fundamental"):
        argument(0, [0.0] * count)