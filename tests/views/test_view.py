"""Tests for views.view: ViewLike protocol and chainable LayoutView intents."""

import pytest

from percentlayout.engine import RecordingEngine
from percentlayout.schemas import Attribute, AttributeRef, RelationKind, as_percentage, at_most
from percentlayout.views import LayoutView, ViewLike


@pytest.fixture
def engine():
    return RecordingEngine()


@pytest.fixture
def container():
    return LayoutView("root")


class TestLayoutView:
    def test_satisfies_protocol(self):
        assert isinstance(LayoutView("v"), ViewLike)

    def test_container_defaults_to_none(self):
        assert LayoutView("v").container is None

    def test_anchor_returns_attribute_ref(self, container):
        ref = container.anchor(Attribute.BOTTOM)
        assert ref == AttributeRef(view=container, attribute=Attribute.BOTTOM)

    def test_anchor_accepts_attribute_name(self, container):
        assert container.anchor("left") == container.anchor(Attribute.LEFT)  # type: ignore[arg-type]

    def test_anchor_rejects_unknown_attribute(self, container):
        with pytest.raises(ValueError):
            container.anchor("centre")  # type: ignore[arg-type]

    def test_repr(self):
        assert repr(LayoutView("avatar")) == "LayoutView('avatar')"


class TestChaining:
    def test_methods_return_self(self, container, engine):
        v = LayoutView("card", container=container)
        result = (
            v.width(as_percentage(90), engine)
            .height(as_percentage(40), engine)
            .top_margin(as_percentage(10), engine)
            .left_margin(as_percentage(5), engine)
        )
        assert result is v
        assert [r.subject.attribute for r in engine.relations] == [
            Attribute.WIDTH,
            Attribute.HEIGHT,
            Attribute.TOP,
            Attribute.LEFT,
        ]

    def test_size_then_margins(self, container, engine):
        v = LayoutView("card", container=container)
        v.size(as_percentage(50), engine).right_margin(as_percentage(100), engine).bottom_margin(
            as_percentage(100), engine
        )
        right, bottom = engine.relations[2:]
        assert right.reference == container.anchor(Attribute.LEFT)
        assert bottom.reference == container.anchor(Attribute.TOP)

    def test_detached_chain_issues_nothing(self, engine):
        v = LayoutView("floating")
        assert v.size(as_percentage(50), engine).bottom_margin(as_percentage(10), engine) is v
        assert engine.relations == []

    def test_mixed_operands(self, container, engine):
        v = LayoutView("card", container=container)
        v.width(as_percentage(50), engine).height(at_most(200), engine)
        w, h = engine.relations
        assert w.reference == container.anchor(Attribute.WIDTH)
        assert h.reference is None
        assert h.kind is RelationKind.LESS_OR_EQUAL
        assert h.constant == 200

    def test_nested_containers_resolve_against_immediate_parent(self, container, engine):
        panel = LayoutView("panel", container=container)
        label = LayoutView("label", container=panel)
        label.width(as_percentage(50), engine)
        assert engine.relations[0].reference == panel.anchor(Attribute.WIDTH)
