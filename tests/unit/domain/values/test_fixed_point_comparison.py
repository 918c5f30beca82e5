from decimal import Decimal

from bign.domain.values import FixedPointNumber


def A():
    return FixedPointNumber.from_scaled_integer(10000, 2)  # 100.00


def B():
    return FixedPointNumber.from_scaled_integer(2345000, 5)  # 23.45000


def C():
    return FixedPointNumber.from_scaled_integer(123450, 3)  # 123.450


# B < A < C


def test_truthy_comparisons():
    assert A().eq(A())
    assert A().lt(C())
    assert A().lte(C())
    assert A().lte(A())
    assert A().gt(B())
    assert A().gte(B())
    assert A().gte(A())


def test_falsy_comparisons():
    assert not A().eq(C())
    assert not A().lt(B())
    assert not A().lte(B())
    assert not A().gt(C())
    assert not A().gte(C())
    assert not A().lt(A())
    assert not A().gt(A())


def test_python_comparison_operators_agree():
    a, b, c = A(), B(), C()

    assert b < a < c
    assert c > a > b
    assert b <= a <= c
    assert c >= a >= b
    assert a == A()
    assert a != c
    assert sorted([c, a, b]) == [b, a, c]


def test_comparison_across_precisions_is_exact():
    fine = FixedPointNumber.from_decimal_string("1.0000000001", precision=10)
    coarse = FixedPointNumber.from_decimal_string("1", precision=2)

    assert fine.gt(coarse)
    assert coarse.lt(fine)
    assert not fine.eq(coarse)


def test_comparison_does_not_mutate_comparand():
    coarse = FixedPointNumber.from_decimal_string("1.5", precision=2)
    before = (coarse.value, coarse.precision, coarse.factor)

    FixedPointNumber.from_decimal_string("1.5", precision=40).eq(coarse)

    assert (coarse.value, coarse.precision, coarse.factor) == before


def test_comparison_with_plain_operands():
    assert A().eq(100)
    assert A().eq("100")
    assert A() == 100
    assert A() == Decimal("100.000")
    assert A() < 101
    assert A() != "100"


def test_clone_compares_equal_to_original():
    a = A()

    assert a.clone().eq(a)
    assert a.clone() == a


def test_hash_is_consistent_with_equality():
    assert hash(FixedPointNumber.from_decimal_string("1.50")) == hash(
        FixedPointNumber.from_decimal_string("1.5", precision=3)
    )
    assert hash(A()) == hash(100)
    assert hash(FixedPointNumber.from_decimal_string("1.5")) == hash(Decimal("1.5"))
    assert len({FixedPointNumber.from_decimal_string("1.0"), FixedPointNumber.from_decimal_string("1.00")}) == 1


def test_rich_comparisons_return_not_implemented_for_unsupported_types():
    assert A().__eq__(1.5) is NotImplemented
    assert A().__lt__("1") is NotImplemented
    assert A().__ge__(None) is NotImplemented
    assert A() != 100.0
