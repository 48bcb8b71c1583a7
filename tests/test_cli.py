"""End-to-end tests for the csscalc command line."""

import pytest

from csscalc import __version__
from csscalc.logic.color.resolver import HEX_TO_HSL, HSL_TO_HEX, detect_direction, resolve_hsl_input
from csscalc.core.errors import InvalidHslValues, UsageError
from csscalc.main import main
from csscalc.shared.formatting import strip_ansi


def run_cli(capsys, *argv):
    main(list(argv))
    out, err = capsys.readouterr()
    return strip_ansi(out).splitlines(), strip_ansi(err)


def run_failing(capsys, *argv):
    with pytest.raises(SystemExit) as exc:
        main(list(argv))
    out, err = capsys.readouterr()
    assert exc.value.code == 1
    assert out == ''
    return strip_ansi(err)


class TestUnitCommand:
    def test_sixteen_px(self, capsys):
        lines, err = run_cli(capsys, 'unit', '16', 'px')
        assert lines == [
            'Conversions for 16px:',
            'px  : 16.00px',
            'rem : 1.00rem',
            'em  : 1.00em',
        ]
        assert err == ''

    def test_short_alias_and_case(self, capsys):
        lines, _ = run_cli(capsys, 'U', '2', 'REM')
        assert 'px  : 32.00px' in lines

    def test_attached_unit(self, capsys):
        lines, _ = run_cli(capsys, 'u', '1.5rem')
        assert lines[0] == 'Conversions for 1.5rem:'
        assert 'px  : 24.00px' in lines

    def test_negative_value(self, capsys):
        lines, _ = run_cli(capsys, 'u', '-4px')
        assert 'rem : -0.25rem' in lines

    def test_explicit_unit_wins(self, capsys):
        lines, _ = run_cli(capsys, 'u', '16px', 'rem')
        assert 'px  : 256.00px' in lines

    def test_unsupported_unit(self, capsys):
        err = run_failing(capsys, 'unit', '16', 'pt')
        assert '[error]' in err
        assert "unsupported unit: 'pt'" in err

    def test_missing_unit(self, capsys):
        assert 'unsupported unit' in run_failing(capsys, 'u', '16')

    def test_not_a_number(self, capsys):
        assert 'must be a number' in run_failing(capsys, 'unit', 'abc', 'px')

    def test_extra_argument(self, capsys):
        assert 'unrecognized arguments' in run_failing(capsys, 'unit', '1', 'px', 'em')


class TestColorCommand:
    def test_hex_to_hsl(self, capsys):
        lines, _ = run_cli(capsys, 'color', '#ff0000')
        assert lines == [
            'HEX to HSL conversion:',
            'HEX: #ff0000',
            'HSL: 0 100% 50%',
        ]

    def test_hex_is_lowercased(self, capsys):
        lines, _ = run_cli(capsys, 'c', '#00FF00')
        assert 'HEX: #00ff00' in lines
        assert 'HSL: 120 100% 50%' in lines

    @pytest.mark.parametrize('token', ['123456', 'abcdef'])
    def test_hex_without_hash_is_read_as_hsl(self, capsys, token):
        assert "HSL format must be 'H S% L%'" in run_failing(capsys, 'c', token)

    def test_hsl_to_hex(self, capsys):
        lines, _ = run_cli(capsys, 'color', '0', '100%', '50%')
        assert lines == [
            'HSL to HEX conversion:',
            'HSL: 0 100% 50%',
            'HEX: #ff0000',
        ]

    def test_hsl_without_percent_signs(self, capsys):
        lines, _ = run_cli(capsys, 'c', '120deg', '50', '50')
        assert 'HEX: #40bf40' in lines

    def test_invalid_hex(self, capsys):
        assert 'invalid hex color' in run_failing(capsys, 'color', '#zzzzzz')

    def test_hex_with_extra_tokens(self, capsys):
        assert 'unexpected arguments' in run_failing(capsys, 'c', '#ff0000', 'extra')

    def test_hsl_missing_lightness(self, capsys):
        assert "HSL format must be 'H S% L%'" in run_failing(capsys, 'c', '120', '50%')

    @pytest.mark.parametrize('values', [
        ('400', '50%', '50%'),
        ('-1', '50%', '50%'),
        ('120', '150%', '50%'),
        ('120', '50%', '101%'),
        ('red', '50%', '50%'),
    ])
    def test_hsl_rejected(self, capsys, values):
        assert '[error]' in run_failing(capsys, 'c', *values)


class TestDispatch:
    def test_no_arguments_prints_usage(self, capsys):
        err = run_failing(capsys)
        assert 'usage: csscalc <command> <value> [unit]' in err
        assert 'unit (u)' in err

    def test_command_without_value(self, capsys):
        assert 'usage:' in run_failing(capsys, 'unit')

    def test_unknown_command(self, capsys):
        assert "unknown command: 'paint'" in run_failing(capsys, 'paint', '1')

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['--version'])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestColorResolver:
    def test_detect_direction(self):
        assert detect_direction(['#123456']) == HEX_TO_HSL
        assert detect_direction(['abcdef']) == HSL_TO_HEX
        assert detect_direction(['120', '50%', '50%']) == HSL_TO_HEX
        assert detect_direction(['#zz']) == HEX_TO_HSL

    def test_resolve_hsl_bounds_are_inclusive(self):
        assert resolve_hsl_input(['360', '100%', '0%']) == (360.0, 100.0, 0.0)

    def test_resolve_hsl_too_many(self):
        with pytest.raises(UsageError):
            resolve_hsl_input(['1', '2%', '3%', '4'])

    def test_resolve_hsl_too_few(self):
        with pytest.raises(InvalidHslValues):
            resolve_hsl_input(['1'])
