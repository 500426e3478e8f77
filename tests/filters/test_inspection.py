from uafilter.core import AttributeId, NodeId, ObjectTypeId, ReferenceTypeId, RelativePathElement
from uafilter.filters import (
    AttributeOperand,
    ContentFilter,
    ContentFilterElement,
    ElementOperand,
    FilterOperator,
    LiteralOperand,
    SimpleAttributeOperand,
    format_filter,
    is_forward_only,
    iter_element_references,
    logical_and,
    logical_or,
    reachable_positions,
)


SEVERITY = ContentFilterElement(
    FilterOperator.GreaterThan,
    [
        SimpleAttributeOperand(ObjectTypeId.BaseEventType, [(0, "Severity")], AttributeId.Value),
        LiteralOperand(200),
    ],
)

IS_EVENT = ContentFilterElement(FilterOperator.OfType, [LiteralOperand(NodeId(0, 2041))])


def test_iter_element_references_lists_every_reference():
    tree = logical_and(SEVERITY, logical_or(IS_EVENT, SEVERITY))
    assert list(iter_element_references(tree)) == [
        (0, 0, 1),
        (0, 1, 2),
        (2, 0, 3),
        (2, 1, 4),
    ]


def test_leaf_has_no_references():
    assert list(iter_element_references(SEVERITY)) == []
    assert is_forward_only(SEVERITY)


def test_is_forward_only_detects_backward_reference():
    tree = ContentFilter(
        [
            ContentFilterElement(FilterOperator.Not, [ElementOperand(1)]),
            ContentFilterElement(FilterOperator.Not, [ElementOperand(0)]),
        ]
    )
    assert not is_forward_only(tree)
    assert is_forward_only(~SEVERITY)


def test_reachable_positions_skips_orphans():
    tree = ContentFilter(
        [
            ContentFilterElement(FilterOperator.Not, [ElementOperand(2)]),
            IS_EVENT,
            SEVERITY,
        ]
    )
    assert reachable_positions(tree) == {0, 2}
    assert reachable_positions(SEVERITY & IS_EVENT) == {0, 1, 2}


def test_format_leaf_and_combinations():
    assert format_filter(SEVERITY) == "GreaterThan(Severity, 200)"
    assert format_filter(~SEVERITY) == "NOT (GreaterThan(Severity, 200))"
    assert format_filter(SEVERITY & ~IS_EVENT) == (
        "(GreaterThan(Severity, 200)) AND (NOT (OfType(NodeId(namespace_index=0, identifier=2041))))"
    )
    assert format_filter(SEVERITY | SEVERITY) == (
        "(GreaterThan(Severity, 200)) OR (GreaterThan(Severity, 200))"
    )


def test_format_attribute_operand_prefers_alias():
    path = [RelativePathElement(ReferenceTypeId.HasComponent, False, True, (1, "Temperature"))]
    aliased = AttributeOperand(ObjectTypeId.BaseObjectType, "temp", path, AttributeId.Value)
    bare = AttributeOperand(ObjectTypeId.BaseObjectType, "", path, AttributeId.Value)
    element = ContentFilterElement(FilterOperator.LessThan, [aliased, bare])
    assert format_filter(element) == "LessThan(temp, 1:Temperature)"


def test_format_marks_cycles():
    tree = ContentFilter([ContentFilterElement(FilterOperator.Not, [ElementOperand(0)])])
    assert format_filter(tree) == "NOT (@0)"
