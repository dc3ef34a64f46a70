"""
CLI glue: argument handling, output streams, exit codes, interactive mode.
"""

import pytest

from radixtool import main as radix_main
from radixtool.converter import convert_number
from radixtool.errors import InvalidDigit


def run(argv):
    radix_main.main(argv)


class TestConvertNumber:
    def test_decimal_to_binary(self):
        assert convert_number("26", 10, 2) == "11010"

    def test_fraction(self):
        assert convert_number("0.1", 3, 10, precision=4) == "0.3333"

    def test_errors_propagate(self):
        with pytest.raises(InvalidDigit):
            convert_number("9", 8, 10)


class TestParseBase:
    def test_integer(self):
        assert radix_main.parse_base("16") == 16
        assert isinstance(radix_main.parse_base(" 16 "), int)

    def test_float(self):
        assert radix_main.parse_base("2.5") == 2.5

    @pytest.mark.parametrize("text", ["ten", "", "inf", "nan", "1_6", "\u0661\u0666", "\uff11\uff16"])
    def test_rejects_non_numbers(self, text):
        with pytest.raises(ValueError):
            radix_main.parse_base(text)


class TestCommandLine:
    def test_decimal_to_binary(self, consoles):
        run(["26", "10", "2"])
        assert consoles.stdout.strip() == "11010"
        assert consoles.stderr == ""

    def test_hex_to_decimal(self, consoles):
        run(["ff", "16", "10"])
        assert consoles.stdout.strip() == "255"

    def test_fractional_input(self, consoles):
        run(["1a.8", "16", "10"])
        assert consoles.stdout.strip() == "26.5"

    def test_auto_base_from_prefix(self, consoles):
        run(["0x1A", "auto", "8"])
        assert consoles.stdout.strip() == "32"

    def test_uppercase_output(self, consoles):
        run(["255", "10", "16", "--upper"])
        assert consoles.stdout.strip() == "FF"

    def test_precision_flag(self, consoles):
        run(["0.1", "3", "10", "-p", "2"])
        assert consoles.stdout.strip() == "0.33"

    def test_invalid_digit_exits_with_error(self, consoles):
        with pytest.raises(SystemExit) as exc:
            run(["2", "2", "10"])
        assert exc.value.code == 1
        assert consoles.stdout == ""
        assert "Error:" in consoles.stderr
        assert "not a valid digit" in consoles.stderr

    def test_malformed_number(self, consoles):
        with pytest.raises(SystemExit) as exc:
            run(["1.2.3", "10", "2"])
        assert exc.value.code == 1
        assert "separator" in consoles.stderr

    def test_non_numeric_base(self, consoles):
        with pytest.raises(SystemExit) as exc:
            run(["5", "ten", "2"])
        assert exc.value.code == 1
        assert "Base must be a number" in consoles.stderr

    def test_underscore_base_text_is_rejected(self, consoles):
        with pytest.raises(SystemExit) as exc:
            run(["5", "1_6", "2"])
        assert exc.value.code == 1
        assert "Base must be a number" in consoles.stderr

    def test_unsupported_target_base(self, consoles):
        with pytest.raises(SystemExit) as exc:
            run(["5", "10", "40"])
        assert exc.value.code == 1
        assert "up to 36" in consoles.stderr

    def test_wrong_argument_count(self, consoles):
        with pytest.raises(SystemExit) as exc:
            run(["5", "10"])
        assert exc.value.code == 1
        assert "Usage" in consoles.stdout

    def test_negative_precision_is_rejected_by_argparse(self, consoles):
        with pytest.raises(SystemExit) as exc:
            run(["5", "10", "2", "-p", "-1"])
        assert exc.value.code == 2


class TestInteractiveMode:
    def feed(self, monkeypatch, answers):
        answers = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    def test_single_conversion_then_quit(self, consoles, monkeypatch):
        self.feed(monkeypatch, ["10", "2", "26", "q"])
        run([])
        assert "Result (10 → 2): 11010" in consoles.stdout
        assert "Exiting." in consoles.stdout

    def test_error_does_not_end_session(self, consoles, monkeypatch):
        self.feed(monkeypatch, ["2", "10", "2", "16", "10", "ff", "q"])
        run([])
        assert "not a valid digit" in consoles.stderr
        assert "Result (16 → 10): 255" in consoles.stdout

    def test_auto_source_base(self, consoles, monkeypatch):
        self.feed(monkeypatch, ["auto", "10", "0b101", "q"])
        run([])
        assert "Result (2 → 10): 5" in consoles.stdout

    def test_end_of_input_exits(self, consoles, monkeypatch):
        self.feed(monkeypatch, [])
        run([])
        assert "Exiting." in consoles.stdout
