import pytest

from conftest import plugin_make

from python_lab_screenshot.errors   import (
    Connect_Failed,
    Identity_Unavailable,
    No_Plugin_Detected,
    Receive_Failed,
    Unknown_Plugin,
)
from python_lab_screenshot.plugins  import registry_default
from python_lab_screenshot.selector import plugin_by_name, plugin_detect, plugin_select


def identity_never(address, timeout):
    raise AssertionError("identity must not be queried")


def test_match_count_is_partial_and_case_sensitive():
    plugin = plugin_make("rigol-1000", "RIGOL DS1... MSO1...")

    assert plugin.match_count("RIGOL TECHNOLOGIES,DS1054Z,DS1ZA000000001,00.04.04") == 2
    assert plugin.match_count("rigol technologies,ds1054z") == 0
    assert plugin_make("none").match_count("RIGOL") == 0


def test_select_by_name(registry):
    for name in ("a", "b", "c"):
        registry.register(plugin_make(name, "X"))

    assert plugin_select(registry, "10.0.0.1", "b", 1.0, identify=identity_never).name == "b"
    assert plugin_by_name(registry, "c").name == "c"


def test_unknown_name(registry):
    registry.register(plugin_make("a", "X"))

    with pytest.raises(Unknown_Plugin):
        plugin_select(registry, "10.0.0.1", "z", 1.0, identify=identity_never)


def test_detect_single_match(registry):
    registry.register(plugin_make("rigol-1000", "RIGOL DS1..."))
    registry.register(plugin_make("tektronix-2000", "TEKTRONIX DPO2..."))

    assert plugin_detect(registry, "TEKTRONIX,DPO2024,C000001,CF:91.1CT").name == "tektronix-2000"


def test_detect_most_matches_wins(registry):
    registry.register(plugin_make("broad", "RIGOL"))
    registry.register(plugin_make("narrow", "RIGOL DS2..."))

    assert plugin_detect(registry, "RIGOL TECHNOLOGIES,DS2102A,DS2A0000,00.03.06").name == "narrow"


def test_detect_tie_first_registered_wins(registry):
    registry.register(plugin_make("first", "RIGOL"))
    registry.register(plugin_make("second", "DS2..."))

    assert plugin_detect(registry, "RIGOL TECHNOLOGIES,DS2102A").name == "first"


def test_detect_no_match(registry):
    registry.register(plugin_make("rigol-1000", "RIGOL"))

    with pytest.raises(No_Plugin_Detected):
        plugin_detect(registry, "KEITHLEY INSTRUMENTS,MODEL 2450")


def test_plugin_without_patterns_never_detected(registry):
    registry.register(plugin_make("manual"))
    registry.register(plugin_make("empty", ""))

    for identity in ("", "manual", ".*", "anything at all"):
        with pytest.raises(No_Plugin_Detected):
            plugin_detect(registry, identity)


def test_detect_empty_registry(registry):
    with pytest.raises(No_Plugin_Detected):
        plugin_detect(registry, "RIGOL")


def test_select_queries_identity_with_timeout(registry):
    registry.register(plugin_make("rigol-1000", "RIGOL"))
    calls = []

    def identify(address, timeout):
        calls.append((address, timeout))
        return "RIGOL TECHNOLOGIES,DS1054Z"

    assert plugin_select(registry, "10.0.0.1", "", 7.5, identify=identify).name == "rigol-1000"
    assert calls == [("10.0.0.1", 7.5)]


@pytest.mark.parametrize("error", [Connect_Failed("10.0.0.1"), Receive_Failed("10.0.0.1")])
def test_identity_failure(registry, error):
    registry.register(plugin_make("rigol-1000", "RIGOL"))

    def identify(address, timeout):
        raise error

    with pytest.raises(Identity_Unavailable) as exc_info:
        plugin_select(registry, "10.0.0.1", "", 1.0, identify=identify)

    assert exc_info.value.__cause__ is error


# ┌────────────────────────────────────────┐
# │ Shipped plugins                        │
# └────────────────────────────────────────┘

def test_siglent_multimeter_detected():
    registry = registry_default()
    identity = "SIGLENT TECHNOLOGIES,SDM3065X,SDM36FAC000000,1.01.01.25"

    plugin = plugin_detect(registry, identity)

    assert plugin.name == "siglent-sdm3000"
    # SIGLENT, TECHNOLOGIES and SDM3... match, the lower case tokens don't
    assert plugin.match_count(identity) == 3


@pytest.mark.parametrize("identity, name", [
    ("KEYSIGHT TECHNOLOGIES,DSO-X 2024A,MY00000000,02.43.2018020635", "keysight-iv2000x"),
    ("AGILENT TECHNOLOGIES,MSO-X 2012A,MY00000000,02.35.2013061800",  "keysight-iv2000x"),
    ("RIGOL TECHNOLOGIES,DS1054Z,DS1ZA000000000,00.04.04.SP4",        "rigol-1000"),
    ("RIGOL TECHNOLOGIES,MSO2302A,MS2A000000000,00.03.01",            "rigol-2000"),
    ("Rohde&Schwarz,HMO1202,000000000,05.886",                        "rs-hmo1000"),
    ("TEKTRONIX,MSO2024B,C000000,CF:91.1CT FV:v1.56",                  "tektronix-2000"),
    ("TEKTRONIX,TDS 2024B,0,CF:91.1CT FV:v22.11",                     "tektronix-tds2000"),
])
def test_shipped_plugins_detected(identity, name):
    assert plugin_detect(registry_default(), identity).name == name
