import copy

from babagrid.enums import ObjectType
from babagrid.objects import GameObject


def test_types_are_sorted_and_distinct():
    obj = GameObject([ObjectType.ICON_ROCK, ObjectType.BABA, ObjectType.BABA])
    assert obj.types() == [ObjectType.BABA, ObjectType.ICON_ROCK]


def test_has_type():
    obj = GameObject([ObjectType.FLAG])
    assert obj.has_type(ObjectType.FLAG)
    assert not obj.has_type(ObjectType.ICON_FLAG)


def test_add_then_remove_restores_equality():
    obj = GameObject([ObjectType.ICON_EMPTY])
    reference = GameObject([ObjectType.ICON_EMPTY])
    obj.add(ObjectType.ICON_BABA, False)
    assert obj != reference
    obj.remove(ObjectType.ICON_BABA)
    assert obj == reference


def test_stacking_inside_board():
    obj = GameObject([ObjectType.ICON_ROCK])
    obj.add(ObjectType.ICON_ROCK, False)
    obj.remove(ObjectType.ICON_ROCK)
    assert obj.has_type(ObjectType.ICON_ROCK)
    obj.remove(ObjectType.ICON_ROCK)
    assert not obj.has_type(ObjectType.ICON_ROCK)


def test_boundary_does_not_stack():
    obj = GameObject([ObjectType.ICON_ROCK])
    obj.add(ObjectType.ICON_ROCK, True)
    obj.remove(ObjectType.ICON_ROCK)
    assert not obj.has_type(ObjectType.ICON_ROCK)


def test_removing_last_leaves_empty_icon():
    obj = GameObject([ObjectType.ICON_WALL])
    obj.remove(ObjectType.ICON_WALL)
    assert obj.types() == [ObjectType.ICON_EMPTY]


def test_removing_absent_kind_keeps_contents():
    obj = GameObject([ObjectType.ICON_WALL])
    obj.remove(ObjectType.ICON_BABA)
    assert obj.types() == [ObjectType.ICON_WALL]


def test_category_queries():
    noun = GameObject([ObjectType.BABA])
    verb = GameObject([ObjectType.IS])
    prop = GameObject([ObjectType.YOU])
    icon = GameObject([ObjectType.ICON_BABA])
    assert noun.has_noun_type() and not noun.has_verb_type()
    assert verb.has_verb_type() and not verb.has_property_type()
    assert prop.has_property_type() and not prop.has_noun_type()
    assert noun.has_text_type() and verb.has_text_type() and prop.has_text_type()
    assert not icon.has_text_type()
    assert not icon.has_noun_type()


def test_and_operator_is_not_verb():
    assert not GameObject([ObjectType.AND]).has_verb_type()


def test_copy_is_independent():
    obj = GameObject([ObjectType.ICON_BABA])
    clone = copy.copy(obj)
    assert clone == obj
    clone.add(ObjectType.ICON_ROCK, False)
    assert not obj.has_type(ObjectType.ICON_ROCK)


def test_is_rule_does_not_affect_equality():
    a = GameObject([ObjectType.BABA])
    b = GameObject([ObjectType.BABA])
    a.is_rule = True
    assert a == b