import pytest

from pushswap.stacks import Operation, Stacks


def test_initial_state():
    stacks = Stacks([3, 1, 2])
    assert list(stacks.a) == [3, 1, 2]
    assert list(stacks.b) == []


@pytest.mark.parametrize(
    "name", ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]
)
def test_operation_name_matches_enum_member(name):
    by_name = Stacks([1, 2, 3, 4, 5])
    by_member = Stacks([1, 2, 3, 4, 5])
    for stacks in (by_name, by_member):
        stacks.apply("pb")
        stacks.apply("pb")
    by_name.apply(name)
    by_member.apply(Operation(name))
    assert Operation(name).value == name
    assert list(by_name.a) == list(by_member.a)
    assert list(by_name.b) == list(by_member.b)


def test_sa_swaps_top_two():
    stacks = Stacks([1, 2, 3])
    stacks.apply(Operation.SA)
    assert list(stacks.a) == [2, 1, 3]


def test_ra_moves_top_to_bottom():
    stacks = Stacks([1, 2, 3])
    stacks.apply(Operation.RA)
    assert list(stacks.a) == [2, 3, 1]


def test_rra_moves_bottom_to_top():
    stacks = Stacks([1, 2, 3])
    stacks.apply(Operation.RRA)
    assert list(stacks.a) == [3, 1, 2]


def test_ra_then_rra_restores():
    numbers = [5, -2, 9, 0]
    stacks = Stacks(numbers)
    stacks.apply("ra")
    stacks.apply("rra")
    assert list(stacks.a) == numbers


def test_pb_and_pa():
    stacks = Stacks([1, 2, 3])
    stacks.apply(Operation.PB)
    stacks.apply(Operation.PB)
    assert list(stacks.a) == [3]
    assert list(stacks.b) == [2, 1]
    stacks.apply(Operation.PA)
    assert list(stacks.a) == [2, 3]
    assert list(stacks.b) == [1]


def test_double_operations_act_on_both():
    stacks = Stacks([1, 2, 3, 4, 5])
    for _ in range(3):
        stacks.apply("pb")
    # a = [4, 5], b = [3, 2, 1]
    stacks.apply("ss")
    assert list(stacks.a) == [5, 4]
    assert list(stacks.b) == [2, 3, 1]
    stacks.apply("rr")
    assert list(stacks.a) == [4, 5]
    assert list(stacks.b) == [3, 1, 2]
    stacks.apply("rrr")
    assert list(stacks.a) == [5, 4]
    assert list(stacks.b) == [2, 3, 1]


def test_sb_rb_rrb_on_b():
    stacks = Stacks([1, 2, 3])
    for _ in range(3):
        stacks.apply("pb")
    stacks.apply("sb")
    assert list(stacks.b) == [2, 3, 1]
    stacks.apply("rb")
    assert list(stacks.b) == [3, 1, 2]
    stacks.apply("rrb")
    assert list(stacks.b) == [2, 3, 1]


def test_short_stacks_unchanged():
    stacks = Stacks([7])
    for op in ("sa", "ra", "rra", "sb", "rb", "rrb", "pa"):
        stacks.apply(op)
    assert list(stacks.a) == [7]
    assert list(stacks.b) == []


def test_push_from_empty_is_noop():
    stacks = Stacks([])
    stacks.apply("pb")
    assert list(stacks.a) == [] and list(stacks.b) == []


def test_unknown_operation():
    stacks = Stacks([1, 2])
    with pytest.raises(ValueError):
        stacks.apply("xx")


def test_operations_preserve_elements():
    numbers = [4, -1, 8, 3, 0, 6]
    stacks = Stacks(numbers)
    for op in ["pb", "pb", "ss", "rr", "pa", "rrr", "sa", "pb", "rrb", "ra"]:
        stacks.apply(op)
    assert sorted(list(stacks.a) + list(stacks.b)) == sorted(numbers)


@pytest.mark.parametrize(
    "numbers, expected",
    [([1, 2, 3], True), ([], True), ([5], True), ([2, 1, 3], False), ([1, 3, 2], False)],
)
def test_is_sorted(numbers, expected):
    assert Stacks(numbers).is_sorted() is expected


def test_is_sorted_ignores_b():
    stacks = Stacks([3, 1, 2])
    stacks.apply("pb")
    assert stacks.is_sorted() is True