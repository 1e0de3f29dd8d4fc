"""Tests for the build -> pack -> render pipeline."""

from __future__ import annotations

import pytest

from helpers import Box, BoxKit, RecordingBackend
from paperkit import (
    Component,
    Frame,
    Kit,
    KitOptions,
    KitState,
    LayoutError,
    Part,
    ParseError,
    RenderContext,
    lookup_scale,
    point,
    printed,
    size,
    world,
)
from paperkit.render import SvgBackend


class House(Component):
    """A wall with one window, to check that children follow their parent."""

    def build(self):
        self.set_extent("20 m", "10 m")
        self.add_child(Box(width="2 m", height="3 m"), point("5 m", "4 m"))

    def render(self, pen):
        pen.polygon([point(0, 0), point(0, "10 m"), point("20 m", "10 m"), point("20 m", 0)])


class HouseKit(Kit):
    def default_options(self):
        return {"scale": "1:1000"}

    def build(self):
        self.add_piece(House())


class EmptyKit(Kit):
    def build(self):
        pass


class PlainPart:
    """A Part that does not derive from Component."""

    def __init__(self):
        self.build_count = 0

    def build(self):
        self.build_count += 1

    def ensure_built(self):
        if not self.build_count:
            self.build()
        return self

    def get_extent(self):
        return size(world("2 m"), world("1 m"))

    def render(self, pen):
        pen.polygon([point(0, 0), point(0, "1 m"), point("2 m", "1 m"), point("2 m", 0)])

    def children(self):
        return []


class PlainKit(Kit):
    def default_options(self):
        return {"scale": "1:1000", "wallColor": "tan"}

    def build(self):
        self.part = PlainPart()
        self.add_piece(self.part)


# =============================================================================
# RENDER CONTEXT
# =============================================================================


class TestRenderContext:
    def test_page_in_world_units(self):
        context = RenderContext.create(lookup_scale("HO"), (612.0, 792.0), "pt", False)
        assert context.printed_width.isclose(printed("8.5 in"))
        assert context.page_width.frame is Frame.WORLD
        assert context.page_width.value == pytest.approx(0.2159 * 87.1)

    def test_world_printed_round_trip(self):
        context = RenderContext.create(lookup_scale("N"), (210.0, 297.0), "mm", True)
        length = world("20 ft")
        assert context.to_world(context.to_printed(length)).isclose(length)
        assert context.to_printed(world("160 m")).isclose(printed("1 m"))

    def test_y_up_master_only_scales(self):
        context = RenderContext.create(lookup_scale("1:100"), (100.0, 50.0), "mm", False)
        mapped = context.master_transform.apply_to_point(point("10 m", "2 m"))
        assert mapped.values() == pytest.approx((0.1, 0.02))

    def test_y_down_master_flips_and_shifts(self):
        context = RenderContext.create(lookup_scale("1:100"), (100.0, 50.0), "mm", True)
        origin = context.master_transform.apply_to_point(point(0, 0))
        top = context.master_transform.apply_to_point(point(0, context.page_height))
        assert origin.values() == pytest.approx((0.0, 0.05))
        assert top.values() == pytest.approx((0.0, 0.0))


# =============================================================================
# OPTIONS
# =============================================================================


class TestKitOptions:
    def test_defaults(self):
        options = KitOptions()
        assert (options.page_format, options.orientation, options.scale, options.backend) == (
            "letter", "portrait", "HO", "pdf",
        )
        assert options.output_path is None
        assert dict(options.extra) == {}

    def test_merged_splits_core_and_extra(self):
        options = KitOptions().merged({"scale": "N", "wallColor": "tan", "extra": {"roofColor": "gray"}})
        assert options.scale == "N"
        assert dict(options.extra) == {"wallColor": "tan", "roofColor": "gray"}

    def test_merged_returns_a_new_object(self):
        base = KitOptions()
        base.merged({"scale": "N"})
        assert base.scale == "HO"

    def test_get(self):
        options = KitOptions().merged({"wallColor": "tan"})
        assert options.get("scale") == "HO"
        assert options.get("wallColor") == "tan"
        assert options.get("missing", 1) == 1

    def test_getitem(self):
        options = KitOptions().merged({"wallColor": "tan"})
        assert options["page_format"] == "letter"
        assert options["wallColor"] == "tan"
        with pytest.raises(KeyError):
            options["missing"]

    def test_invalid_orientation(self):
        with pytest.raises(ValueError):
            KitOptions(orientation="sideways")

    def test_extra_is_read_only(self):
        with pytest.raises(TypeError):
            KitOptions().extra["x"] = 1

    def test_output_path_coerced(self, tmp_path):
        options = KitOptions().merged({"output_path": str(tmp_path / "kit.pdf")})
        assert options.output_path == tmp_path / "kit.pdf"
        assert options.as_dict()["output_path"] == str(tmp_path / "kit.pdf")

    def test_from_yaml(self, tmp_path):
        config = tmp_path / "house.yaml"
        config.write_text("scale: N\npage_format: a4\nextra:\n  houseWidth: 24 ft\nwallColor: tan\n")
        options = KitOptions.from_yaml(config)
        assert options.scale == "N"
        assert options.page_format == "a4"
        assert options.extra["houseWidth"] == "24 ft"
        assert options.extra["wallColor"] == "tan"

    def test_yaml_must_be_a_mapping(self, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("- scale\n- N\n")
        with pytest.raises(ValueError):
            KitOptions.from_yaml(config)


# =============================================================================
# PIPELINE
# =============================================================================


class TestPipelineOrder:
    def test_pack_before_build(self):
        with pytest.raises(RuntimeError, match="not been built"):
            HouseKit().pack()

    def test_render_before_pack(self):
        kit = HouseKit()
        kit.run_build()
        with pytest.raises(RuntimeError, match="not been packed"):
            kit.render(RecordingBackend())

    def test_add_piece_after_build(self):
        kit = HouseKit()
        kit.run_build()
        with pytest.raises(RuntimeError):
            kit.add_piece(Box(width="1 m", height="1 m"))

    def test_build_must_be_implemented(self):
        with pytest.raises(NotImplementedError):
            Kit().run_build()

    def test_empty_kit_warns(self, recording_backend):
        with pytest.warns(UserWarning, match="no pieces"):
            EmptyKit().generate(backend=recording_backend)
        assert recording_backend.polylines == []

    def test_states(self, recording_backend):
        kit = HouseKit()
        assert kit.state is KitState.NEW
        kit.generate(backend=recording_backend)
        assert kit.state is KitState.RENDERED


class TestPieces:
    def test_plain_part_satisfies_protocol(self):
        part = PlainPart()
        assert isinstance(part, Part)
        assert not isinstance(part, Component)

    def test_plain_part_is_packed_and_drawn(self, recording_backend):
        kit = PlainKit()
        kit.generate(backend=recording_backend)

        assert kit.part.build_count == 1
        assert kit.pieces[0].width == pytest.approx(2.0)
        (outline,) = recording_backend.polylines
        assert outline == [
            pytest.approx((0.0, 100.0)),
            pytest.approx((0.0, 99.0)),
            pytest.approx((2.0, 99.0)),
            pytest.approx((2.0, 100.0)),
        ]

    def test_add_piece_rejects_non_parts(self):
        kit = HouseKit()
        with pytest.raises(TypeError, match="needs a Part"):
            kit.add_piece(object())

    def test_option(self):
        kit = PlainKit()
        assert kit.option("scale") == "1:1000"
        assert kit.option("wallColor") == "tan"

    def test_missing_option_names_it(self):
        with pytest.raises(KeyError, match="roofColor"):
            PlainKit().option("roofColor")


class TestGenerate:
    def test_pre_order_render_with_y_down_page(self, recording_backend):
        HouseKit().generate(backend=recording_backend)

        wall, window = recording_backend.polylines
        # 1:1000 on a 100 mm tall page: world meters become mm, Y measured from the top.
        assert wall == [
            pytest.approx((0.0, 100.0)),
            pytest.approx((0.0, 90.0)),
            pytest.approx((20.0, 90.0)),
            pytest.approx((20.0, 100.0)),
        ]
        assert window[0] == pytest.approx((5.0, 96.0))
        assert window[2] == pytest.approx((7.0, 93.0))

    def test_y_up_page_has_no_flip(self):
        backend = RecordingBackend(y_axis_down=False)
        HouseKit().generate(backend=backend)
        wall, window = backend.polylines
        assert wall[1] == pytest.approx((0.0, 10.0))
        assert window[0] == pytest.approx((5.0, 4.0))

    def test_page_breaks_between_pages(self, recording_backend):
        # Each piece fills most of a 200 x 100 m page.
        kit = BoxKit([("150 m", "80 m")] * 3)
        kit.generate(backend=recording_backend)
        assert len(kit.pages) == 3
        assert [c[0] for c in recording_backend.calls].count("new_page") == 2
        assert [piece.page_index for piece in kit.pieces] == [0, 1, 2]

    def test_overrides_and_metadata(self, recording_backend):
        kit = BoxKit([("1 m", "1 m")])
        kit.generate({"page_format": "a4", "orientation": "landscape"}, backend=recording_backend)
        assert recording_backend.calls[0] == ("page_size", "a4", "landscape")
        assert recording_backend.metadata["title"] == "BoxKit"
        assert recording_backend.metadata["creator"] == "paperkit"
        assert "using these options" in recording_backend.metadata["subject"]
        assert kit.context.scale.ratio == 1000.0

    def test_default_output_name(self, recording_backend):
        paths = BoxKit([("1 m", "1 m")]).generate(backend=recording_backend)
        assert paths == [recording_backend.saved_to]
        assert recording_backend.saved_to.name == "BoxKit.rec"

    def test_output_path_argument(self, recording_backend, tmp_path):
        BoxKit([("1 m", "1 m")]).generate(backend=recording_backend, output_path=tmp_path / "out.rec")
        assert recording_backend.saved_to == tmp_path / "out.rec"

    def test_oversized_piece(self, recording_backend):
        with pytest.raises(LayoutError):
            BoxKit([("1 km", "1 km")]).generate(backend=recording_backend)

    def test_bad_scale(self, recording_backend):
        with pytest.raises(ParseError):
            BoxKit([("1 m", "1 m")]).generate({"scale": "1:0"}, backend=recording_backend)

    def test_generate_can_run_twice(self, recording_backend):
        kit = BoxKit([("1 m", "1 m")])
        kit.generate(backend=recording_backend)
        kit.generate(backend=RecordingBackend())
        assert len(kit.pieces) == 1

    def test_svg_document(self, tmp_path):
        kit = BoxKit([("150 m", "200 m")] * 2)
        paths = kit.generate(
            {"page_format": "a4"}, backend=SvgBackend(), output_path=tmp_path / "boxes.svg",
        )
        assert [p.name for p in paths] == ["boxes_page1.svg", "boxes_page2.svg"]
        text = paths[0].read_text()
        assert text.startswith("<svg")
        assert "<polygon" in text
        assert "<title>BoxKit</title>" in text
