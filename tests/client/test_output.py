#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""Tests for CLI output styling."""

from pyroshow.client.output import Output, format_number, format_vec, strip_ansi


class TestStripAnsi:
    def test_strips_color_codes(self):
        colored = "\x1b[38;2;255;170;68mburst\x1b[0m"
        assert strip_ansi(colored) == "burst"

    def test_preserves_plain_text(self):
        assert strip_ansi("palm shell") == "palm shell"

    def test_strips_multiple_codes(self):
        text = "\x1b[1m\x1b[38;2;255;0;0mbold red\x1b[0m"
        assert strip_ansi(text) == "bold red"


class TestNumberFormatting:
    def test_drops_trailing_zeros(self):
        assert format_number(2.5) == "2.5"
        assert format_number(3.0) == "3"

    def test_precision(self):
        assert format_number(1.23456, 2) == "1.23"

    def test_integers_keep_zeros(self):
        assert format_number(800, 0) == "800"
        assert format_number(100.0) == "100"

    def test_negative_zero(self):
        assert format_number(-0.0001) == "0"

    def test_vec(self):
        assert format_vec((0.0, 10.5, -2.25)) == "(0, 10.5, -2.25)"


class TestSemanticMethods:
    """Test that semantic methods apply styling correctly."""

    def test_no_color_env_disables_colors(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        out = Output()
        assert not out.color_enabled
        assert "\x1b[" not in out.effect("ring")

    def test_effect_applies_styling(self):
        out = Output(force_color=True)
        result = out.effect("willow")
        assert "\x1b[" in result
        assert "willow" in result

    def test_number_applies_styling(self):
        out = Output(force_color=True)
        result = out.number(7.5)
        assert "\x1b[" in result
        assert strip_ansi(result) == "7.5"

    def test_header_is_bold_only(self):
        out = Output(force_color=True)
        assert out.header("Effects") == "\x1b[1mEffects\x1b[0m"

    def test_forced_off(self):
        out = Output(force_color=False)
        assert out.key("gravity") == "gravity"


class TestStateMethods:
    def test_success_has_checkmark(self):
        out = Output(force_color=False)
        assert out.success("Saved") == "✓ Saved"

    def test_error_has_cross(self):
        out = Output(force_color=False)
        assert out.error("Unknown effect") == "✗ Unknown effect"

    def test_warning_has_marker(self):
        out = Output(force_color=False)
        assert out.warning("careful").startswith("!")

    def test_flag(self):
        out = Output(force_color=False)
        assert out.flag(True) == "✓"
        assert out.flag(False) == "-"


class TestCompoundFormatters:
    def test_kv(self):
        out = Output(force_color=False)
        assert out.kv("tail", "2s") == "tail = 2s"

    def test_effect_line(self):
        out = Output(force_color=False)
        line = out.effect_line("ring", "closed_form", "Flat halo")
        assert line == "ring [closed_form] Flat halo"

    def test_trait_line(self):
        out = Output(force_color=False)
        line = out.trait_line("star-count", "int", constraints="min: 1")
        assert line == "  star-count (int) min: 1"

    def test_trait_line_with_value(self):
        out = Output(force_color=False)
        line = out.trait_line("burn-time", "float", "3.5")
        assert line == "  burn-time (float) = 3.5"


class TestTable:
    def test_keys_right_aligned(self):
        out = Output(force_color=False)
        lines = out.table([("arc", "high"), ("lead", "0.8s")])
        assert lines == ["  arc │ high", " lead │ 0.8s"]

    def test_title_adds_header_and_separator(self):
        out = Output(force_color=False)
        lines = out.table([("a", "1")], title="t=5", width=20)
        assert strip_ansi(lines[0]).strip().startswith("t=5")
        assert "┼" in lines[1]
        assert len(lines) == 3

    def test_long_values_truncated(self):
        out = Output(force_color=False)
        line = out.table_row(4, "key", "x" * 200, width=40)
        assert line.endswith("(...)")
        assert len(line) < 60

    def test_rule_spans_width(self):
        out = Output(force_color=False)
        lines = out.table([("a", "1")], title="t", width=30)
        assert len(lines[1]) == 30
