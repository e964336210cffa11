"""Tests for printing and reading file headers

Example:
--------
    python -m pytest -s test_header_codec.py
"""

# RinexData imports
from rinexdata.data import RinexData
from rinexdata.header.labels import Label
from rinexdata.lib.enums import ReadStatus

from test_header_store import V3_PAYLOADS


def test_v3_header_printed_and_read(printed, text_file):
    """A fully populated header gives the same records when it is printed and read again"""
    rinex = RinexData(3.04, program="rinexdata", run_by="NMA", logger=None)
    for label, payload in V3_PAYLOADS:
        assert rinex.set_header_data(label, *payload)
    rinex.set_header_data(Label.SYS, "R", ["C1C", "L1C"])
    rinex.set_header_data(Label.GLSLT, 2, -4)
    rinex.set_header_data(Label.COMM, "AFTER GLONASS SLOTS")
    lines = printed(rinex.print_obs_header)

    copy = RinexData(3.04, logger=None)
    assert copy.read_rinex_header(text_file(lines)) == Label.EOH

    skipped = (Label.IONC, Label.TIMC)
    for label, payload in V3_PAYLOADS:
        if label not in skipped:
            assert copy.get_header_data(label) == payload, label.name
    assert copy.get_header_data(Label.SYS, 1) == ("R", ["C1C", "L1C"])
    assert copy.get_header_data(Label.GLSLT, 1) == (2, -4)
    assert copy.get_header_data(Label.COMM) == ("AFTER GLONASS SLOTS",)
    assert [lbl for lbl in rinex.labels() if lbl not in skipped] == list(copy.labels())


def test_navigation_records_not_in_observation_header(printed):
    rinex = RinexData(3.04, logger=None)
    for label, payload in V3_PAYLOADS:
        rinex.set_header_data(label, *payload)
    lines = printed(rinex.print_obs_header)

    assert not [line for line in lines if line.endswith(("IONOSPHERIC CORR", "TIME SYSTEM CORR"))]


def test_v3_header_lines(rinex_v3, printed):
    lines = printed(rinex_v3.print_obs_header)

    assert lines[0] == f"{'     3.04           OBSERVATION DATA    M: MIXED':60s}RINEX VERSION / TYPE"
    assert lines[1].startswith("rinexdata           NMA                 ")
    assert lines[1].endswith("UTC PGM / RUN BY / DATE")
    assert f"{'G    3 C1C L1C S1C':60s}SYS / # / OBS TYPES" in lines
    assert f"{'  2018     5     7     0     0    0.0000000     GPS':60s}TIME OF FIRST OBS" in lines
    assert lines[-1] == f"{'':60s}END OF HEADER"


def test_v2_header_lines(rinex_v2, printed):
    lines = printed(rinex_v2.print_obs_header)

    assert lines[0] == f"{'     2.10           OBSERVATION DATA    G: GPS':60s}RINEX VERSION / TYPE"
    assert f"{'     2    C1    L1':60s}# / TYPES OF OBSERV" in lines
    assert not [line for line in lines if line.endswith("SYS / # / OBS TYPES")]


def test_long_observation_type_records_continue(printed):
    rinex = RinexData(3.04, logger=None)
    codes = ["C1C", "L1C", "D1C", "S1C", "C1W", "C2W", "L2W", "D2W", "S2W", "C2L", "L2L", "D2L", "S2L", "C5Q", "L5Q"]
    rinex.set_header_data(Label.SYS, "G", codes)

    lines = printed(rinex.print_obs_header)
    assert lines == []

    sys_lines = [line for line in _header_with_site(rinex, printed) if line.endswith("SYS / # / OBS TYPES")]
    assert sys_lines[0].startswith("G   15 C1C L1C D1C S1C C1W C2W L2W D2W S2W C2L L2L D2L S2L")
    assert sys_lines[1] == f"{'       C5Q L5Q':60s}SYS / # / OBS TYPES"


def _header_with_site(rinex, printed):
    rinex.set_header_data(Label.MRKNAME, "TEST")
    rinex.set_header_data(Label.AGENCY, "OPERATOR", "NMA")
    rinex.set_header_data(Label.RECEIVER, "3008040", "SEPT POLARX4", "2.9.0")
    rinex.set_header_data(Label.ANTTYPE, "CR620012101", "ASH701945C_M    SCIS")
    rinex.set_header_data(Label.APPXYZ, 3275756.7623, 321111.1395, 5445046.6477)
    rinex.set_header_data(Label.ANTHEN, 0.0, 0.0, 0.0)
    rinex.set_header_data(Label.TOFO, 2000, 86400.0, "G")
    return printed(rinex.print_obs_header)


def test_v2_navigation_header_read_into_v3_container(header_line, text_file, printed):
    """RINEX 2 ionospheric and time corrections are printed as RINEX 3 records"""
    lines = [
        header_line("     2.10           N: GPS NAV DATA", "RINEX VERSION / TYPE"),
        header_line("CCRINEXN V1.6.0 UX  CDDIS               30-MAY-18 15:14", "PGM / RUN BY / DATE"),
        header_line("    0.1676D-07  0.2235D-07 -0.1192D-06 -0.1192D-06", "ION ALPHA"),
        header_line("    0.1208D+06  0.1310D+06 -0.1310D+06 -0.1966D+06", "ION BETA"),
        header_line("   -0.186264514923D-08-0.532907051820D-14   405504     1855", "DELTA-UTC: A0,A1,T,W"),
        header_line("    18", "LEAP SECONDS"),
        header_line("", "END OF HEADER"),
    ]
    rinex = RinexData(3.04, logger=None)

    assert rinex.read_rinex_header(text_file(lines)) == Label.EOH
    assert rinex.get_header_data(Label.INFILEVER) == (2.10, "N", "G")
    assert rinex.get_header_data(Label.IONA) == ([0.1676e-07, 0.2235e-07, -0.1192e-06, -0.1192e-06],)
    assert rinex.get_header_data(Label.IONC, 0) == (
        Label.IONC_GPSA, [0.1676e-07, 0.2235e-07, -0.1192e-06, -0.1192e-06], -1, 0
    )
    assert rinex.get_header_data(Label.LEAP) == (18, 0, 0, 0, " ")

    header = printed(rinex.print_nav_header)
    assert f"{'GPSA   1.6760E-08  2.2350E-08 -1.1920E-07 -1.1920E-07':60s}IONOSPHERIC CORR" in header
    assert f"{'GPSB   1.2080E+05  1.3100E+05 -1.3100E+05 -1.9660E+05':60s}IONOSPHERIC CORR" in header
    assert f"{'GPUT -1.8626451492E-09-5.329070518E-15 405504 1855':60s}TIME SYSTEM CORR" in header


def test_v2_mixed_observation_types(header_line, text_file):
    """Observation types of a mixed RINEX 2 file apply to every system"""
    lines = [
        header_line("     2.10           OBSERVATION DATA    M (MIXED)", "RINEX VERSION / TYPE"),
        header_line("     3    C1    L1    C5", "# / TYPES OF OBSERV"),
        header_line("", "END OF HEADER"),
    ]
    rinex = RinexData(3.04, logger=None)

    assert rinex.read_rinex_header(text_file(lines)) == Label.EOH
    assert rinex.get_header_data(Label.SYS, 0) == ("G", ["C1C", "L1C"])
    assert rinex.get_header_data(Label.SYS, 1) == ("R", ["C1C", "L1C"])


def test_observation_types_continued_on_next_line(header_line, text_file):
    lines = [
        header_line("     2.10           OBSERVATION DATA    G (GPS)", "RINEX VERSION / TYPE"),
        header_line("    10    C1    L1    D1    S1    P1    P2    L2    D2    S2", "# / TYPES OF OBSERV"),
        header_line("          C2", "# / TYPES OF OBSERV"),
        header_line("", "END OF HEADER"),
    ]
    rinex = RinexData(3.04, logger=None)

    assert rinex.read_rinex_header(text_file(lines)) == Label.EOH
    assert rinex.get_header_data(Label.SYS) == ("G", ["C1C", "L1C", "D1C", "S1C", "C1P", "C2P", "L2P", "D2P", "S2P"])


def test_invalid_header_line_skipped(header_line, text_file):
    lines = [
        header_line("     3.04           OBSERVATION DATA    G: GPS", "RINEX VERSION / TYPE"),
        header_line("  not a number  0.0           0.0", "APPROX POSITION XYZ"),
        header_line("STAS", "MARKER NAME"),
        header_line("", "END OF HEADER"),
    ]
    rinex = RinexData(3.04, logger=None)

    assert rinex.read_rinex_header(text_file(lines)) == Label.EOH
    assert rinex.get_header_data(Label.APPXYZ) is None
    assert rinex.get_header_data(Label.MRKNAME) == ("STAS",)


def test_file_without_version_record(header_line, text_file):
    rinex = RinexData(3.04, logger=None)
    lines = [header_line("STAS", "MARKER NAME"), header_line("", "END OF HEADER")]

    assert rinex.read_rinex_header(text_file(lines)) == Label.VERSION
    assert rinex.get_header_data(Label.INFILEVER) is None
    assert rinex.read_obs_epoch(text_file([])) == ReadStatus.epoch_error


def test_file_of_unknown_version(header_line, text_file):
    rinex = RinexData(3.04, logger=None)
    lines = [header_line("     4.00           OBSERVATION DATA    G: GPS", "RINEX VERSION / TYPE")]

    assert rinex.read_rinex_header(text_file(lines)) == Label.VERSION


def test_file_ending_inside_header(header_line, text_file):
    rinex = RinexData(3.04, logger=None)
    lines = [header_line("     3.04           OBSERVATION DATA    G: GPS", "RINEX VERSION / TYPE")]

    assert rinex.read_rinex_header(text_file(lines)) == Label.LASTONE
    assert rinex.read_rinex_header(text_file([])) == Label.LASTONE


V2_OBS_PAYLOADS = [
    (Label.MRKNAME, ("STAS",)),
    (Label.MRKNUMBER, ("10330M001",)),
    (Label.AGENCY, ("SATREF", "Norwegian Mapping Authority")),
    (Label.RECEIVER, ("3008040", "SEPT POLARX4", "2.9.0")),
    (Label.ANTTYPE, ("CR620012101", "ASH701945C_M    SCIS")),
    (Label.APPXYZ, (3275756.7623, 321111.1395, 5445046.6477)),
    (Label.ANTHEN, (0.0, 0.0, 0.0)),
    (Label.WVLEN, (1, 1, [])),
    (Label.TOBS, ("G", ["C1", "P2", "L1"])),
    (Label.INT, (30.0,)),
    (Label.TOFO, (2000, 86400.0, "G")),
    (Label.TOLO, (2000, 172770.0, "G")),
    (Label.CLKOFFS, (0,)),
    (Label.LEAP, (18, 0, 0, 0, " ")),
    (Label.SATS, (12,)),
    (Label.PRNOBS, ("G", 1, [2875, 2875, 2870])),
]

V2_NAV_PAYLOADS = [
    (Label.LEAP, (18, 0, 0, 0, " ")),
    (Label.IONA, ([1.676e-08, 2.235e-08, -1.192e-07, -1.192e-07],)),
    (Label.IONB, ([1.208e05, 1.310e05, -1.310e05, -1.966e05],)),
    (Label.DUTC, (-1.86264514923e-09, -5.32907051820e-15, 405504, 1855)),
    (Label.CORRT, (2018, 5, 7, -1.86264514923e-09)),
    (Label.GEOT, (1.33179128170e-07, 1.07469588780e-13, 552960, 1855, "EGNOS", 2)),
]


def test_v2_observation_header_printed_and_read(printed, text_file):
    rinex = RinexData(2.10, program="rinexdata", run_by="NMA", logger=None)
    for label, payload in V2_OBS_PAYLOADS:
        assert rinex.set_header_data(label, *payload)
    rinex.set_header_data(Label.WVLEN, 2, 1, ["G14", "G15"])
    lines = printed(rinex.print_obs_header)

    copy = RinexData(2.10, logger=None)
    assert copy.read_rinex_header(text_file(lines)) == Label.EOH

    assert copy.get_header_data(Label.INFILEVER) == (2.10, "O", "G")
    for label, payload in V2_OBS_PAYLOADS:
        assert copy.get_header_data(label) == payload, label.name
    assert copy.get_header_data(Label.WVLEN, 1) == (2, 1, ["G14", "G15"])
    assert list(rinex.labels()) == list(copy.labels())


def test_v2_navigation_header_printed_and_read(printed, text_file):
    rinex = RinexData(2.10, program="rinexdata", run_by="NMA", logger=None)
    for label, payload in V2_NAV_PAYLOADS:
        assert rinex.set_header_data(label, *payload)
    lines = printed(rinex.print_nav_header)

    assert f"{'    0.1676D-07  0.2235D-07 -0.1192D-06 -0.1192D-06':60s}ION ALPHA" in lines
    assert f"{'  2018     5     7   -0.186264514923D-08':60s}CORR TO SYSTEM TIME" in lines

    copy = RinexData(2.10, logger=None)
    assert copy.read_rinex_header(text_file(lines)) == Label.EOH

    assert copy.get_header_data(Label.INFILEVER) == (2.10, "N", "G")
    for label, payload in V2_NAV_PAYLOADS:
        assert copy.get_header_data(label) == payload, label.name
    assert list(rinex.labels()) == list(copy.labels())


def test_complete_record_kept_when_next_line_is_invalid(header_line, text_file):
    """A record continued over several lines is stored even if the line after it cannot be decoded"""
    lines = [
        header_line("     3.04           OBSERVATION DATA    G: GPS", "RINEX VERSION / TYPE"),
        header_line("G    2 C1C L1C", "SYS / # / OBS TYPES"),
        header_line("   abc", "INTERVAL"),
        header_line("", "END OF HEADER"),
    ]
    rinex = RinexData(3.04, logger=None)

    assert rinex.read_rinex_header(text_file(lines)) == Label.EOH
    assert rinex.get_header_data(Label.SYS) == ("G", ["C1C", "L1C"])
    assert rinex.get_header_data(Label.INT) is None


def test_invalid_record_of_same_label_keeps_previous(header_line, text_file):
    lines = [
        header_line("     3.04           OBSERVATION DATA    M: MIXED", "RINEX VERSION / TYPE"),
        header_line("G    2 C1C L1C", "SYS / # / OBS TYPES"),
        header_line("R    x C1C L1C", "SYS / # / OBS TYPES"),
        header_line("", "END OF HEADER"),
    ]
    rinex = RinexData(3.04, logger=None)

    assert rinex.read_rinex_header(text_file(lines)) == Label.EOH
    assert rinex.get_header_data(Label.SYS, 0) == ("G", ["C1C", "L1C"])
    assert rinex.get_header_data(Label.SYS, 1) is None


def test_line_after_incomplete_record_is_read(header_line, text_file):
    """A record with fewer items than declared is skipped, the line following it is still stored"""
    lines = [
        header_line("     3.04           OBSERVATION DATA    G: GPS", "RINEX VERSION / TYPE"),
        header_line("G    3 C1C L1C", "SYS / # / OBS TYPES"),
        header_line("STAS", "MARKER NAME"),
        header_line("", "END OF HEADER"),
    ]
    rinex = RinexData(3.04, logger=None)

    assert rinex.read_rinex_header(text_file(lines)) == Label.EOH
    assert rinex.get_header_data(Label.SYS) is None
    assert rinex.get_header_data(Label.MRKNAME) == ("STAS",)
