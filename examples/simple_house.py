#!/usr/bin/env python3
"""
Simple House Example

A two-story house with a gable roof:
- Two peaked walls (front and back), each with three windows and a door
- Two straight side walls, each with six windows
- Two roof slabs

Every dimension is a kit option, so the same kit can be printed at any
scale and in any proportions:

    paperkit generate examples/simple_house.py:SimpleHouse --scale N
    paperkit generate examples/simple_house.py:SimpleHouse --set houseDepth="40 ft"

Outputs:
- SimpleHouse.pdf (or .svg with --backend svg)
"""

import logging
from pathlib import Path

from paperkit import Component, Kit, distance_between, point, world


class SimpleHouse(Kit):
    def default_options(self):
        return {
            "houseWidth": "20 ft",
            "houseDepth": "30 ft",
            "foundationHeight": "2 ft",
            "storyHeight": "10 ft",
            "ridgeHeight": "10 ft",
            "windowWidth": "3 ft",
            "windowHeight": "5 ft",
            "windowBaseHeight": "3 ft",
            "doorWidth": "4 ft",
            "atticWindowWidth": "2 ft",
            "atticWindowHeight": "2 ft",
            "atticWindowBaseHeight": "2 ft",
            "wallColor": "peachpuff",
            "basementColor": "#BBBBBB",
            "trimColor": "red",
            "roofColor": "gray",
        }

    def build(self):
        opts = self.options.extra
        self.add_piece(PeakedWall(opts))  # south
        self.add_piece(PeakedWall(opts))  # north
        self.add_piece(StraightWall(opts))  # east
        self.add_piece(StraightWall(opts))  # west
        self.add_piece(RoofSlab(opts))
        self.add_piece(RoofSlab(opts))


class PeakedWall(Component):
    """Gable end: windows on both floors, door on the ground floor."""

    def build(self):
        g = self.geometry
        g.houseWidth = world(self.option("houseWidth"))
        g.windowWidth = world(self.option("windowWidth"))
        g.doorWidth = world(self.option("doorWidth"))
        g.foundationHeight = world(self.option("foundationHeight"))
        g.storyHeight = world(self.option("storyHeight"))
        g.ridgeHeight = world(self.option("ridgeHeight"))
        g.windowBaseHeight = world(self.option("windowBaseHeight"))

        # Window and door columns are separated by equal gaps.
        g.spacing = (g.houseWidth - g.windowWidth - g.doorWidth) / 3
        g.xA = world(0)
        g.xB = g.xA + g.spacing
        g.xC = g.xB + g.windowWidth
        g.xMid = g.houseWidth / 2
        g.xG = g.xC + g.spacing
        g.xI = g.houseWidth

        g.yGround = world(0)
        g.yFirstFloor = g.yGround + g.foundationHeight
        g.ySecondFloor = g.yFirstFloor + g.storyHeight
        g.yEaves = g.ySecondFloor + g.storyHeight
        g.yRidge = g.yEaves + g.ridgeHeight

        g.wallOutline = [
            point(g.xA, g.yGround), point(g.xA, g.yEaves),
            point(g.xMid, g.yRidge), point(g.xI, g.yEaves),
            point(g.xI, g.yGround),
        ]
        g.basementOutline = [
            point(g.xA, g.yGround), point(g.xA, g.yFirstFloor),
            point(g.xI, g.yFirstFloor), point(g.xI, g.yGround),
        ]

        self.add_child(Window(self.options), point(g.xB, g.yFirstFloor + g.windowBaseHeight))
        self.add_child(Window(self.options), point(g.xB, g.ySecondFloor + g.windowBaseHeight))
        self.add_child(Window(self.options), point(g.xG, g.ySecondFloor + g.windowBaseHeight))
        self.add_child(Door(self.options), point(g.xG, g.yFirstFloor))
        attic_width = world(self.option("atticWindowWidth"))
        attic_base = world(self.option("atticWindowBaseHeight"))
        self.add_child(AtticWindow(self.options), point(g.xMid - attic_width / 2, g.yEaves + attic_base))

        self.set_extent(g.houseWidth, g.yRidge)

    def render(self, pen):
        pen.set_style(draw_color="black", fill_color=self.option("wallColor"))
        pen.polygon(self.geometry.wallOutline, "fill_and_stroke")
        pen.set_style(draw_color="black", fill_color=self.option("basementColor"))
        pen.polygon(self.geometry.basementOutline, "fill_and_stroke")


class StraightWall(Component):
    """Side wall with two rows of three evenly spaced windows."""

    def build(self):
        g = self.geometry
        g.houseDepth = world(self.option("houseDepth"))
        g.foundationHeight = world(self.option("foundationHeight"))
        g.storyHeight = world(self.option("storyHeight"))
        g.windowWidth = world(self.option("windowWidth"))
        g.windowBaseHeight = world(self.option("windowBaseHeight"))

        g.xA = world(0)
        g.xQ = g.xA + g.houseDepth
        g.yGround = world(0)
        g.yFirstFloor = g.yGround + g.foundationHeight
        g.ySecondFloor = g.yFirstFloor + g.storyHeight
        g.yEaves = g.ySecondFloor + g.storyHeight

        g.wallOutline = [
            point(g.xA, g.yGround), point(g.xA, g.yEaves),
            point(g.xQ, g.yEaves), point(g.xQ, g.yGround),
        ]
        g.basementOutline = [
            point(g.xA, g.yGround), point(g.xA, g.yFirstFloor),
            point(g.xQ, g.yFirstFloor), point(g.xQ, g.yGround),
        ]

        spacing = (g.houseDepth - g.windowWidth * 3) / 4
        increment = spacing + g.windowWidth
        base = g.yFirstFloor + g.windowBaseHeight
        for row in range(2):
            y = base + g.storyHeight * row
            for col in range(3):
                x = spacing + increment * col
                self.add_child(Window(self.options), point(x, y))

        self.set_extent(g.houseDepth, g.yEaves)

    def render(self, pen):
        pen.set_style(draw_color="black", fill_color=self.option("wallColor"))
        pen.polygon(self.geometry.wallOutline, "fill_and_stroke")
        pen.set_style(draw_color="black", fill_color=self.option("basementColor"))
        pen.polygon(self.geometry.basementOutline, "fill_and_stroke")


class Window(Component):
    """Four-pane window drawn as a single open path."""

    width_key = "windowWidth"
    height_key = "windowHeight"

    def build(self):
        g = self.geometry
        g.width = world(self.option(self.width_key))
        g.height = world(self.option(self.height_key))

        left = world(0)
        right = left + g.width
        mid_x = left + g.width / 2
        bottom = world(0)
        top = bottom + g.height
        mid_y = bottom + g.height / 2

        g.outline = [
            point(mid_x, top), point(mid_x, bottom),
            point(left, bottom), point(left, top),
            point(right, top), point(right, bottom),
            point(left, bottom), point(left, mid_y),
            point(right, mid_y),
        ]
        self.set_extent(g.width, g.height)

    def render(self, pen):
        pen.set_style(draw_color=self.option("trimColor"))
        pen.open_path(self.geometry.outline)


class AtticWindow(Window):
    width_key = "atticWindowWidth"
    height_key = "atticWindowHeight"


class Door(Component):
    def build(self):
        g = self.geometry
        g.width = world(self.option("doorWidth"))
        g.height = world(self.option("windowHeight")) + world(self.option("windowBaseHeight"))
        g.outline = [
            point(0, 0), point(0, g.height),
            point(g.width, g.height), point(g.width, 0),
        ]
        self.set_extent(g.width, g.height)

    def render(self, pen):
        pen.set_style(draw_color=self.option("trimColor"))
        pen.open_path(self.geometry.outline)


class RoofSlab(Component):
    """One side of the gable roof; its height is the sloped rafter length."""

    def build(self):
        g = self.geometry
        g.houseWidth = world(self.option("houseWidth"))
        g.houseDepth = world(self.option("houseDepth"))
        g.ridgeHeight = world(self.option("ridgeHeight"))

        eave = point(0, 0)
        ridge = point(g.houseWidth / 2, g.ridgeHeight)
        g.slope = distance_between(eave, ridge)

        g.outline = [
            point(0, 0), point(0, g.slope),
            point(g.houseDepth, g.slope), point(g.houseDepth, 0),
        ]
        self.set_extent(g.houseDepth, g.slope)

    def render(self, pen):
        pen.set_style(draw_color="black", fill_color=self.option("roofColor"))
        pen.polygon(self.geometry.outline, "fill_and_stroke")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    print("Simple House Example")
    print("=" * 50)

    kit = SimpleHouse()
    paths = kit.generate({"scale": "HO"}, output_path=output_dir / "simple_house.pdf")
    print(f"\nPacked {len(kit.pieces)} pieces onto {len(kit.pages)} page(s)")
    for path in paths:
        print(f"Exported: {path}")


if __name__ == "__main__":
    main()
