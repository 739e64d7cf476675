"""End-to-end tests for the building generator, registry and service."""

from __future__ import annotations

import pytest

from housegen.core.registry import PhaseRegistry, create_default_registry
from housegen.core.units import internal_to_mm, mm_to_internal
from housegen.errors import CatalogLookupError, GeometryError, LevelNotFoundError
from housegen.models import (
    BuildConfig, BuildParams, BuildContext, FootprintSpec, OpeningType, TypeRef,
    create_default_document,
)
from housegen.services.model_service import ModelService


@pytest.fixture
def service() -> ModelService:
    return ModelService()


class TestDefaultBuild:
    def test_element_counts(self, service, document) -> None:
        model = service.build(document=document)
        assert model.stats.walls == 4
        assert model.stats.doors == 1
        assert model.stats.windows == 3
        assert model.stats.roofs == 1
        assert document.element_count == 9
        assert len(document.reference_planes) == 1

    def test_wall_lengths_alternate(self, service) -> None:
        model = service.build()
        lengths = [internal_to_mm(w.length) for w in model.walls]
        assert lengths == pytest.approx([10000, 5000, 10000, 5000])

    def test_door_on_front_wall(self, service) -> None:
        model = service.build()
        (door,) = model.doors
        assert door.wall_id == model.walls[0].id
        assert door.point == model.walls[0].centerline.midpoint
        assert door.point.z == 0.0

    def test_windows_on_remaining_walls(self, service) -> None:
        model = service.build()
        assert [w.wall_id for w in model.windows] == [w.id for w in model.walls[1:]]
        for window, wall in zip(model.windows, model.walls[1:]):
            mid = wall.centerline.midpoint
            assert (window.point.x, window.point.y) == (mid.x, mid.y)
            assert window.point.z == mid.z + mm_to_internal(900)
            assert window.type == OpeningType.WINDOW

    def test_roof_ridge_elevation(self, service, document) -> None:
        model = service.build(document=document)
        level2 = document.require_level("Level 2")
        assert model.roof.profile.ridge.z == pytest.approx(level2.elevation + 1.3 + 3)
        assert model.roof.level == level2

    def test_openings_activate_symbols(self, service, document) -> None:
        model = service.build(document=document)
        assert all(o.symbol.is_active for o in model.openings)

    def test_rebuild_is_bit_exact(self, service) -> None:
        first = service.build()
        second = service.build()
        assert [w.centerline for w in first.walls] == [w.centerline for w in second.walls]
        assert first.roof.profile == second.roof.profile
        assert [o.point for o in first.openings] == [o.point for o in second.openings]

    def test_deep_footprint(self, service) -> None:
        model = service.build(BuildParams(width_mm=4000, depth_mm=9000))
        profile = model.roof.profile
        assert profile.eave_start.y == profile.eave_end.y
        assert profile.eave_start.x < profile.eave_end.x
        assert profile.rise == pytest.approx(3.0)


class TestFailures:
    def test_missing_level(self, service) -> None:
        with pytest.raises(LevelNotFoundError):
            service.build(BuildParams(top_level_name="Level 3"))

    def test_missing_roof_type_abandons_build(self, service, document) -> None:
        config = BuildConfig(roof_type=TypeRef(name="Slate", family_name="Basic Roof"))
        with pytest.raises(CatalogLookupError, match="Slate"):
            service.build(config=config, document=document)
        assert document.element_count == 0
        assert all(
            t.is_active == (t.name not in ("0915 x 2134mm", "0915 x 1830mm"))
            for t in document.catalog.types
        )

    def test_non_atomic_build_keeps_committed_phases(self, service, document) -> None:
        config = BuildConfig(
            roof_type=TypeRef(name="Slate", family_name="Basic Roof"),
            atomic_build=False,
        )
        with pytest.raises(CatalogLookupError):
            service.build(config=config, document=document)
        assert len(document.walls) == 4
        assert len(document.openings) == 4
        assert document.roofs == []

    def test_missing_door_type(self, service, document) -> None:
        config = BuildConfig(door_type=TypeRef(name="0915 x 2134mm", family_name="Double"))
        with pytest.raises(CatalogLookupError):
            service.build(config=config, document=document)
        assert document.walls == []

    def test_nan_ridge_rise_abandons_build(self, service, document) -> None:
        with pytest.raises(GeometryError, match="Ridge rise"):
            service.build(BuildParams(ridge_rise=float("nan")), document=document)
        assert document.element_count == 0

    @pytest.mark.parametrize("width,depth", [(0, 5000), (10000, -1)])
    def test_bad_dimensions(self, service, document, width, depth) -> None:
        with pytest.raises(GeometryError):
            service.build(BuildParams(width_mm=width, depth_mm=depth), document=document)
        assert document.element_count == 0

    def test_levels_swapped(self, service) -> None:
        params = BuildParams(base_level_name="Level 2", top_level_name="Level 1")
        with pytest.raises(GeometryError, match="must be above"):
            service.build(params)


class TestPhaseSelection:
    def test_disable_roof(self, service) -> None:
        model = service.build(config=BuildConfig(disabled_phases=["roof.extrusion_gable"]))
        assert model.roof is None
        assert model.stats.walls == 4

    def test_only_walls(self, service) -> None:
        model = service.build(config=BuildConfig(enabled_phases=["walls.exterior"]))
        assert model.openings == []
        assert model.roof is None

    def test_no_walls_means_nothing_else(self, service) -> None:
        model = service.build(config=BuildConfig(disabled_phases=["walls.exterior"]))
        assert model.walls == []
        assert model.openings == []
        assert model.roof is None


class TestRegistry:
    def test_default_order(self) -> None:
        registry = create_default_registry()
        document = create_default_document()
        context = BuildContext(
            document=document,
            params=BuildParams(),
            footprint=FootprintSpec(
                width=10000, depth=5000,
                base_level=document.levels[0], top_level=document.levels[1],
            ),
        )
        ids = [p.get_id() for p in registry.get_enabled_phases(context)]
        assert ids == [
            "walls.exterior", "openings.door", "openings.windows", "roof.extrusion_gable",
        ]

    def test_dependencies_pull_ahead(self) -> None:
        from housegen.phases.roof import ExtrusionRoofPhase
        from housegen.phases.walls import ExteriorWallsPhase

        walls = ExteriorWallsPhase()
        walls.priority = 999
        registry = PhaseRegistry()
        registry.register(ExtrusionRoofPhase())
        registry.register(walls)
        document = create_default_document()
        context = BuildContext(
            document=document,
            params=BuildParams(),
            footprint=FootprintSpec(
                width=10000, depth=5000,
                base_level=document.levels[0], top_level=document.levels[1],
            ),
        )
        ids = [p.get_id() for p in registry.get_enabled_phases(context)]
        assert ids == ["walls.exterior", "roof.extrusion_gable"]

    def test_unregister(self) -> None:
        registry = create_default_registry()
        registry.unregister("openings.door")
        assert registry.get_phase("openings.door") is None
        assert len(registry.list_phases()) == 3

    def test_service_lists_phases(self, service) -> None:
        assert {p["id"] for p in service.list_phases()} == {
            "walls.exterior", "openings.door", "openings.windows", "roof.extrusion_gable",
        }
