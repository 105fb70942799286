"""
Pytest configuration and shared fixtures for dtsugar tests.
"""

import pytest

from dtsugar import convert, ConvertOptions


def dts(*lines):
    """Build overlay source lines, each with a line terminator."""
    return [line + "\n" for line in lines]


# a single fragment, with a nested node in the overlay body
BASIC_OVERLAY = dts(
    '/dts-v1/;',
    '/plugin/;',
    '',
    '/ {',
    '\tfragment@0 {',
    '\t\ttarget = <&i2c1>;',
    '\t\t__overlay__ {',
    '\t\t\tstatus = "okay";',
    '\t\t\t#address-cells = <1>;',
    '\t\t\tsensor@40 {',
    '\t\t\t\tcompatible = "ti,tmp102";',
    '\t\t\t\treg = <0x40>;',
    '\t\t\t};',
    '\t\t};',
    '\t};',
    '};',
)

BASIC_SUGAR = [
    '/dts-v1/;',
    '/plugin/;',
    '',
    '&i2c1 {',
    '\tstatus = "okay";',
    '\t#address-cells = <1>;',
    '\tsensor@40 {',
    '\t\tcompatible = "ti,tmp102";',
    '\t\treg = <0x40>;',
    '\t};',
    '};',
]

TARGET_PATH_OVERLAY = dts(
    '/dts-v1/;',
    '/plugin/;',
    '',
    '/ {',
    '\tfragment@0 {',
    '\t\ttarget-path = "/soc/gpio";',
    '\t\t__overlay__ {',
    '\t\t\tstatus = "okay";',
    '\t\t};',
    '\t};',
    '};',
)

# two root properties, then two fragments
ROOT_PROPERTY_OVERLAY = dts(
    '/dts-v1/;',
    '/plugin/;',
    '',
    '/ {',
    '\tcompatible = "brcm,bcm2835";',
    '\tmodel = "test";',
    '',
    '\tfragment@0 {',
    '\t\ttarget = <&i2c1>;',
    '\t\t__overlay__ {',
    '\t\t\tstatus = "okay";',
    '\t\t};',
    '\t};',
    '',
    '\tfragment@1 {',
    '\t\ttarget = <&spi0>;',
    '\t\t__overlay__ {',
    '\t\t\tstatus = "disabled";',
    '\t\t};',
    '\t};',
    '};',
)

ROOT_PROPERTY_SUGAR = [
    '/dts-v1/;',
    '/plugin/;',
    '',
    '/ {',
    '\tcompatible = "brcm,bcm2835";',
    '\tmodel = "test";',
    '',
    '};',
    '&i2c1 {',
    '\tstatus = "okay";',
    '};',
    '',
    '&spi0 {',
    '\tstatus = "disabled";',
    '};',
]

# a decompiled overlay, still carrying compiler generated nodes
SYMBOLS_OVERLAY = dts(
    '/dts-v1/;',
    '/plugin/;',
    '',
    '/ {',
    '\tfragment@0 {',
    '\t\ttarget = <&i2c1>;',
    '\t\t__overlay__ {',
    '\t\t\tstatus = "okay";',
    '\t\t};',
    '\t};',
    '',
    '\t__symbols__ {',
    '\t\tsensor = "/fragment@0/__overlay__";',
    '\t};',
    '};',
)

SYMBOLS_CONVERTED = [
    '/dts-v1/;',
    '/plugin/;',
    '',
    '&i2c1 {',
    '\tstatus = "okay";',
    '};',
    '',
]

MISSING_TARGET_OVERLAY = dts(
    '/dts-v1/;',
    '/plugin/;',
    '',
    '/ {',
    '\tfragment@0 {',
    '\t\t__overlay__ {',
    '\t\t\tstatus = "okay";',
    '\t\t};',
    '\t};',
    '};',
)

# already in the syntactic sugar form
SUGAR_OVERLAY = dts(
    '/dts-v1/;',
    '/plugin/;',
    '',
    '&i2c1 {',
    '\tstatus = "okay";',
    '\tsensor@40 {',
    '\t\treg = <0x40>;',
    '\t};',
    '};',
)


@pytest.fixture
def basic_overlay():
    return list(BASIC_OVERLAY)


@pytest.fixture
def target_path_overlay():
    return list(TARGET_PATH_OVERLAY)


@pytest.fixture
def root_property_overlay():
    return list(ROOT_PROPERTY_OVERLAY)


@pytest.fixture
def symbols_overlay():
    return list(SYMBOLS_OVERLAY)


@pytest.fixture
def missing_target_overlay():
    return list(MISSING_TARGET_OVERLAY)


@pytest.fixture
def sugar_overlay():
    return list(SUGAR_OVERLAY)


@pytest.fixture
def run_convert():
    """
    Return a helper that converts lines with the given option values.

    The helper returns the ConversionResult of the conversion.
    """
    def _run(lines, force=False, indent_fix=True, verbose=0):
        options = ConvertOptions(force=force, indent_fix=indent_fix, verbose=verbose)
        return convert(lines, options)

    return _run


@pytest.fixture
def overlay_file(tmp_path):
    """
    Return a helper that writes overlay lines to a file and returns its path.
    """
    def _write(lines, name="overlay.dts"):
        path = tmp_path / name
        path.write_text("".join(lines))
        return str(path)

    return _write


@pytest.fixture
def basic_sugar():
    return list(BASIC_SUGAR)


@pytest.fixture
def root_property_sugar():
    return list(ROOT_PROPERTY_SUGAR)


@pytest.fixture
def symbols_converted():
    return list(SYMBOLS_CONVERTED)
