"""Tests for the listing renderer."""

import pytest

from termls.commands.models import Options
from termls.utils.colors import ColorSpecResolver
from termls.utils.output_formatter import Renderer

DIR_COLOR = "\x1b[0;34m"
RESET = "\x1b[0m"


class TestRenderer:
    """Test cases for Renderer output modes."""

    @pytest.fixture
    def default_colors(self):
        return ColorSpecResolver().resolve()

    def test_empty_input_renders_nothing(self):
        assert Renderer(Options(color=False)).render([], 80) == ""
        assert Renderer(Options(color=False, long=True)).render([], 80) == ""

    def test_grid(self, make_listing):
        listings = [make_listing(n) for n in ["a", "bb", "ccc", "d", "ee"]]
        output = Renderer(Options(color=False)).render(listings, 10)
        assert output == "a    d\nbb   ee\nccc"
        assert all(len(line) <= 10 for line in output.split("\n"))

    def test_grid_single_row(self, make_listing):
        listings = [make_listing(n) for n in ["one", "two", "three"]]
        assert Renderer(Options(color=False)).render(listings, 80) == "one  two  three"

    def test_grid_padding_ignores_escape_sequences(self, make_listing, default_colors):
        listings = [make_listing("a", "drwxr-xr-x"), make_listing("bb"), make_listing("c")]
        output = Renderer(Options(), default_colors).render(listings, 6)
        # two rows, column widths [2, 1]; padding counts only the visible name
        assert output.split("\n") == [f"{DIR_COLOR}a{RESET}   c", "bb"]

    def test_one_per_line(self, make_listing):
        listings = [make_listing(n) for n in ["x", "y", "z"]]
        output = Renderer(Options(color=False, one_per_line=True)).render(listings, 80)
        assert output == "x\ny\nz"

    def test_long_form_alignment(self, make_listing):
        listings = [
            make_listing("a", size="5"),
            make_listing("b", size="1536", owner="root", group="wheel", time_or_year="12:34"),
        ]
        output = Renderer(Options(color=False, long=True)).render(listings, 80)
        assert output.split("\n") == [
            "-rw-r--r--  1 alice staff    5 Jan 01  2020 a",
            "-rw-r--r--  1 root  wheel 1536 Jan 01 12:34 b",
        ]

    def test_long_form_wide_link_counts(self, make_listing):
        listings = [
            make_listing("a", hard_link_count="120"),
            make_listing("b", hard_link_count="3"),
        ]
        lines = Renderer(Options(color=False, long=True)).render(listings, 80).split("\n")
        assert lines[0].startswith("-rw-r--r-- 120 ")
        assert lines[1].startswith("-rw-r--r--   3 ")

    def test_long_form_symlink_target(self, make_listing):
        link = make_listing("link", "lrwxrwxrwx", link_target="target")
        output = Renderer(Options(color=False, long=True)).render([link], 80)
        assert output.endswith("link -> target")

    def test_link_target_only_in_long_form(self, make_listing):
        link = make_listing("link", "lrwxrwxrwx", link_target="target")
        assert Renderer(Options(color=False)).render([link], 80) == "link"

    def test_colorized_name(self, make_listing, default_colors):
        renderer = Renderer(Options(), default_colors)
        assert renderer.format_name(make_listing("d", "drwxr-xr-x")) == f"{DIR_COLOR}d{RESET}"
        assert renderer.format_name(make_listing("plain")) == "plain"

    def test_color_disabled(self, make_listing, default_colors):
        renderer = Renderer(Options(color=False), default_colors)
        assert renderer.format_name(make_listing("d", "drwxr-xr-x")) == "d"

    def test_undefined_category_still_gets_end(self, make_listing, default_colors):
        # the default BSD spec defines no multi_hardlink color
        renderer = Renderer(Options(), default_colors)
        listing = make_listing("prog", "-rwxr-xr-x", hard_link_count="2")
        assert renderer.format_name(listing) == f"prog{RESET}"

    def test_orphan_target_without_escape_still_gets_end(self, make_listing):
        table = ColorSpecResolver().resolve(None, "or=31")
        renderer = Renderer(Options(long=True), table)
        orphan = make_listing("gone", "lrwxrwxrwx", link_target="missing", link_orphan=True)
        assert renderer.format_name(orphan) == f"\x1b[31mgone{RESET} -> missing{RESET}"

    def test_orphan_link_target_colored(self, make_listing):
        table = ColorSpecResolver().resolve(None, "or=31:mi=05")
        renderer = Renderer(Options(long=True), table)
        orphan = make_listing("gone", "lrwxrwxrwx", link_target="missing", link_orphan=True)
        assert renderer.format_name(orphan) == f"\x1b[31mgone{RESET} -> \x1b[05mmissing{RESET}"

    def test_orphan_link_target_plain_without_color(self, make_listing):
        table = ColorSpecResolver().resolve(None, "or=31:mi=05")
        renderer = Renderer(Options(long=True, color=False), table)
        orphan = make_listing("gone", "lrwxrwxrwx", link_target="missing", link_orphan=True)
        assert renderer.format_name(orphan) == "gone -> missing"
