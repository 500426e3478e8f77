import pytest

from uafilter.core import AttributeId, NodeId, ObjectTypeId
from uafilter.filters import (
    ContentFilter,
    ContentFilterElement,
    ElementOperand,
    EmptyFilterError,
    FilterOperator,
    FilterTreeError,
    IndexOutOfRangeError,
    InvalidReferenceError,
    LiteralOperand,
    SimpleAttributeOperand,
    as_content_filter,
)


ELEMENTS = [
    ContentFilterElement(FilterOperator.And, [ElementOperand(1), ElementOperand(2)]),
    ContentFilterElement(FilterOperator.OfType, [LiteralOperand(NodeId(0, ObjectTypeId.BaseEventType))]),
    ContentFilterElement(FilterOperator.Equals, [LiteralOperand(99), LiteralOperand(99)]),
]


def test_from_elements_round_trips():
    tree = ContentFilter.from_elements(ELEMENTS)
    assert tree.elements == tuple(ELEMENTS)
    assert tree.element_count() == 3
    assert len(tree) == 3
    assert list(tree) == ELEMENTS
    assert tree.root.filter_operator is FilterOperator.And


def test_element_accessors():
    tree = ContentFilter(ELEMENTS)
    assert tree.element(1).filter_operator is FilterOperator.OfType
    assert tree[2].filter_operands == (LiteralOperand(99), LiteralOperand(99))
    assert tree[1:] == tuple(ELEMENTS[1:])
    assert tree.root.filter_operands[0].index == 1


def test_element_lookup_out_of_range():
    tree = ContentFilter(ELEMENTS)
    with pytest.raises(IndexOutOfRangeError) as excinfo:
        tree.element(3)
    assert excinfo.value.position == 3
    assert excinfo.value.size == 3
    with pytest.raises(IndexOutOfRangeError):
        tree.element(-1)
    with pytest.raises(IndexError):
        tree[10]


def test_reference_past_end_is_rejected():
    elements = [
        ContentFilterElement(FilterOperator.Not, [ElementOperand(1)]),
    ]
    with pytest.raises(InvalidReferenceError) as excinfo:
        ContentFilter.from_elements(elements)
    assert excinfo.value.position == 0
    assert excinfo.value.operand_position == 0
    assert excinfo.value.target == 1
    assert isinstance(excinfo.value, FilterTreeError)


def test_negative_reference_is_rejected():
    elements = [
        ContentFilterElement(FilterOperator.And, [ElementOperand(1), ElementOperand(-1)]),
        ContentFilterElement(FilterOperator.IsNull, [LiteralOperand(None)]),
    ]
    with pytest.raises(InvalidReferenceError) as excinfo:
        ContentFilter.from_elements(elements)
    assert excinfo.value.operand_position == 1
    assert excinfo.value.target == -1


def test_lookup_error_is_distinct_from_invalid_reference():
    assert not issubclass(IndexOutOfRangeError, InvalidReferenceError)
    assert not issubclass(InvalidReferenceError, IndexOutOfRangeError)


def test_empty_filter_is_rejected():
    with pytest.raises(EmptyFilterError):
        ContentFilter.from_elements([])


def test_backward_reference_allowed_unless_strict():
    elements = [
        ContentFilterElement(FilterOperator.Equals, [LiteralOperand(1), LiteralOperand(1)]),
        ContentFilterElement(FilterOperator.Not, [ElementOperand(0)]),
    ]
    assert ContentFilter.from_elements(elements).element_count() == 2
    with pytest.raises(InvalidReferenceError):
        ContentFilter.from_elements(elements, strict=True)


def test_strict_mode_accepts_forward_references():
    tree = ContentFilter.from_elements(ELEMENTS, strict=True)
    assert tree.element_count() == 3


def test_non_element_items_are_rejected():
    with pytest.raises(TypeError):
        ContentFilter([FilterOperator.And])


def test_element_rejects_unknown_operand():
    with pytest.raises(TypeError):
        ContentFilterElement(FilterOperator.IsNull, [42])


def test_element_normalizes_operator_and_operands():
    element = ContentFilterElement(2, iter([LiteralOperand(1)]))
    assert element.filter_operator is FilterOperator.GreaterThan
    assert element.filter_operands == (LiteralOperand(1),)


def test_leaf_filter_from_single_element():
    element = ContentFilterElement(
        FilterOperator.GreaterThan,
        [
            SimpleAttributeOperand(ObjectTypeId.BaseEventType, [(0, "Severity")], AttributeId.Value),
            LiteralOperand(200),
        ],
    )
    leaf = as_content_filter(element)
    assert leaf == ContentFilter.from_element(element)
    assert leaf.elements == (element,)
    assert as_content_filter(leaf) is leaf


def test_filters_compare_by_elements():
    assert ContentFilter(ELEMENTS) == ContentFilter(list(ELEMENTS))
    assert hash(ContentFilter(ELEMENTS)) == hash(ContentFilter(ELEMENTS))
    assert ContentFilter(ELEMENTS) != ContentFilter(ELEMENTS[1:])
