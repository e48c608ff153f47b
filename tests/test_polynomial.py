import pytest

from algolab.polynomial import Polynomial, Term


def _value(poly, x):
    return sum(term.coef * x ** term.expn for term in poly)


@pytest.fixture
def p():
    return Polynomial([Term(5, 4), Term(3, 3), Term(1, 1), Term(1, 0)])


@pytest.fixture
def q():
    return Polynomial([Term(6, 5), Term(2, 2), Term(2, 1)])


def test_str_of_source_example(p):
    assert str(p) == "5x^4+3x^3+1x^1+1"


def test_str_negative_coefficient_has_no_plus():
    assert str(Polynomial([Term(5, 4), Term(-3, 3)])) == "5x^4-3x^3"


def test_str_first_term_always_shows_power():
    assert str(Polynomial([Term(7, 0)])) == "7x^0"


def test_empty_polynomial_prints_like_cancelled(p):
    assert str(p - p) == str(Polynomial())
    assert len(p - p) == 0


def test_tuples_accepted_as_terms():
    assert Polynomial([(1, 2), (3, 0)]) == Polynomial([Term(1, 2), Term(3, 0)])


def test_addition_commutes(p, q):
    assert p + q == q + p


@pytest.mark.parametrize("x", [-2, -1, 0, 1, 2, 3])
def test_addition_values(p, q, x):
    assert _value(p + q, x) == _value(p, x) + _value(q, x)


@pytest.mark.parametrize("x", [-2, -1, 0, 1, 2, 3])
def test_subtraction_values(p, q, x):
    assert _value(p - q, x) == _value(p, x) - _value(q, x)


def test_subtract_then_add_restores(p, q):
    assert (p - q) + q == p


def test_self_subtraction_is_empty(p):
    assert p - p == Polynomial()


def test_cancelling_terms_dropped():
    result = Polynomial([Term(2, 3), Term(2, 1)]) + Polynomial([Term(-2, 1)])
    assert result == Polynomial([Term(2, 3)])


@pytest.mark.parametrize("x", [-2, -1, 0, 1, 2])
def test_product_values(p, q, x):
    assert _value(p * q, x) == _value(p, x) * _value(q, x)


def test_product_commutes(p, q):
    assert p * q == q * p


def test_product_with_one(p):
    assert p * Polynomial([Term(1, 0)]) == p


def test_results_keep_descending_exponents(p, q):
    for result in (p + q, p - q, p * q):
        exponents = [term.expn for term in result]
        assert exponents == sorted(set(exponents), reverse=True)


def test_adding_non_polynomial_raises(p):
    with pytest.raises(TypeError):
        p + 1
    assert str(p) == "5x^4+3x^3+1x^1+1"