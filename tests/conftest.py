import pytest

from lpbridge import LP, CompKind, ConstantOffset, Constraint, Objective, OptKind, Variable


def make_example_lp(opt_kind=OptKind.MINIMIZE, offset=6.0) -> LP:
    """
    minimize 5a + 3c + offset
      s.t. b >= 3
           b + c = 10
           a >= 2b
           3c + 5 >= a
           c <= 9
    """
    objective = Objective(
        [Variable("a", 5), Variable("c", 3), ConstantOffset(offset)],
        opt_kind,
    )
    constraints = [
        Constraint([Variable("b")], CompKind.GE, [ConstantOffset(3)]),
        Constraint([Variable("b"), Variable("c")], CompKind.EQ, [ConstantOffset(10)]),
        Constraint([Variable("a")], CompKind.GE, [Variable("b", 2)]),
        Constraint([Variable("c", 3), ConstantOffset(5)], CompKind.GE, [Variable("a")]),
        Constraint([Variable("c")], CompKind.LE, [ConstantOffset(9)]),
    ]
    return LP(objective, constraints)


@pytest.fixture
def example_lp() -> LP:
    return make_example_lp()
