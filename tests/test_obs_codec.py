"""Tests for reading and writing epochs of observation files

Example:
--------
    python -m pytest -s test_obs_codec.py
"""

# Standard library imports
import io

# Third party imports
import pytest

# RinexData imports
from rinexdata.data import RinexData
from rinexdata.header.labels import Label
from rinexdata.lib.enums import EpochFlag, ReadStatus

from conftest import TOW, WEEK


def _file_of(rinex, printed, text_file, *print_functions):
    """In-memory file with everything printed by the given functions of a container"""
    lines = list()
    for print_function in print_functions:
        lines.extend(printed(print_function))
    return text_file(lines)


#
# Writing
#
def test_v2_epoch_line_and_observations(rinex_v2, printed):
    """A GPS observation is printed in its RINEX 2 column with the signal strength"""
    tag = rinex_v2.set_epoch_time(WEEK, TOW, 0, 0)
    assert rinex_v2.save_obs_data("G", 5, "C1C", 20000000.0, 0, 7, tag)

    lines = printed(rinex_v2.print_obs_epoch)

    assert lines == [" 18  5  7  0  0  0.0000000  0  1G05", "  20000000.000 7"]


def test_v2_epoch_with_many_satellites(rinex_v2, printed):
    """More than 12 satellites continue on the next line"""
    rinex_v2.set_epoch_time(WEEK, TOW)
    for prn in range(1, 15):
        rinex_v2.save_obs_data("G", prn, "L1C", 100000000.0 + prn)

    lines = printed(rinex_v2.print_obs_epoch)

    assert lines[0].startswith(" 18  5  7  0  0  0.0000000  0 14G01G02G03")
    assert lines[0].endswith("G12")
    assert lines[1] == " " * 32 + "G13G14"
    assert lines[2] == " " * 16 + " 100000001.000"
    assert len(lines) == 16


def test_v3_epoch_line_and_observations(rinex_v3, printed):
    """RINEX 3 satellite lines follow the observation types of the system"""
    rinex_v3.set_epoch_time(WEEK, TOW)
    rinex_v3.save_obs_data("G", 5, "C1C", 22492348.344, 0, 7)
    rinex_v3.save_obs_data("G", 5, "S1C", 45.0)
    rinex_v3.save_obs_data("R", 7, "L1C", 118199520.051, 1, 5)

    lines = printed(rinex_v3.print_obs_epoch)

    assert lines == [
        "> 2018 05 07 00 00  0.0000000  0  2",
        "G05" + "  22492348.344 7" + " " * 16 + "        45.000",
        "R07" + " " * 16 + " 118199520.05115",
    ]


def test_receiver_clock_offset(rinex_v3, printed):
    rinex_v3.set_epoch_time(WEEK, TOW, bias=0.000123456789)
    rinex_v3.save_obs_data("G", 5, "C1C", 22492348.344)

    lines = printed(rinex_v3.print_obs_epoch)

    assert lines[0] == "> 2018 05 07 00 00  0.0000000  0  1       0.000123456789"


def test_scale_factor_applied_when_printing(rinex_v3, printed):
    rinex_v3.set_header_data(Label.SCALE, "G", 10, ["S1C"])
    rinex_v3.set_epoch_time(WEEK, TOW)
    rinex_v3.save_obs_data("G", 5, "S1C", 45.0)

    lines = printed(rinex_v3.print_obs_epoch)

    assert lines[1] == "G05" + " " * 32 + "       450.000"


def test_event_epoch_prints_changed_records(rinex_v3, printed):
    """A header information event carries the records and comments set after the header was printed"""
    printed(rinex_v3.print_obs_header)
    rinex_v3.set_epoch_time(WEEK, TOW + 30, flag=EpochFlag.header_info)
    rinex_v3.set_header_data(Label.ANTHEN, 0.1, 0.0, 0.0)
    rinex_v3.set_header_data(Label.COMM, "ANTENNA HEIGHT CHANGED")

    lines = printed(rinex_v3.print_obs_epoch)

    assert lines == [
        "> 2018 05 07 00 00 30.0000000  4  2",
        f"{'        0.1000        0.0000        0.0000':60s}ANTENNA: DELTA H/E/N",
        f"{'ANTENNA HEIGHT CHANGED':60s}COMMENT",
    ]


def test_event_epoch_without_records_is_not_printed(rinex_v3, printed):
    printed(rinex_v3.print_obs_header)
    rinex_v3.set_epoch_time(WEEK, TOW, flag=EpochFlag.new_site)

    assert rinex_v3.print_obs_epoch(None) is False


def test_end_of_file_record(rinex_v3, rinex_v2, printed):
    assert printed(rinex_v3.print_obs_eof) == [">" + " " * 30 + "4  1", f"{'END OF FILE':60s}COMMENT"]
    assert printed(rinex_v2.print_obs_eof) == [" " * 28 + "4  1", f"{'END OF FILE':60s}COMMENT"]


def test_header_not_printed_without_obligatory_records(printed):
    rinex = RinexData(3.04, logger=None)

    assert printed(rinex.print_obs_header) == []
    assert rinex.print_obs_header(None) is False


#
# Storing observations
#
def test_value_limits():
    rinex = RinexData(3.04, logger=None)
    rinex.set_epoch_time(WEEK, TOW)

    assert rinex.save_obs_data("G", 1, "C1C", 9999999999.999)
    assert not rinex.save_obs_data("G", 2, "C1C", 10000000000.000)
    assert rinex.save_obs_data("G", 3, "C1C", -999999999.999)
    assert not rinex.save_obs_data("G", 4, "C1C", -1000000000.000)


def test_duplicate_observation_rejected():
    rinex = RinexData(3.04, logger=None)
    rinex.set_epoch_time(WEEK, TOW)

    assert rinex.save_obs_data("G", 5, "C1C", 22492348.344)
    assert not rinex.save_obs_data("G", 5, "C1C", 1.0)
    assert rinex.get_obs_data(0) == ("G", 5, "C1C", 22492348.344, 0, 0)
    assert rinex.get_obs_data(1) is None


@pytest.mark.parametrize(
    "system, prn, code, lol, strength",
    [("X", 5, "C1C", 0, 0), ("G", 0, "C1C", 0, 0), ("G", 100, "C1C", 0, 0), ("G", 5, "XXX", 0, 0),
     ("G", 5, "C1C", 10, 0), ("G", 5, "C1C", 0, -1)],
)
def test_invalid_observation_rejected(system, prn, code, lol, strength):
    rinex = RinexData(3.04, logger=None)
    rinex.set_epoch_time(WEEK, TOW)

    assert not rinex.save_obs_data(system, prn, code, 1.0, lol, strength)
    assert rinex.get_obs_data(0) is None


@pytest.mark.parametrize(
    "system, prn, code, value",
    [("G", 5, None, 1.0), ("G", "5", "C1C", 1.0), (5, 5, "C1C", 1.0), ("G", 5, "C1C", "x"), ("G", 5.0, "C1C", 1.0)],
)
def test_wrong_type_of_observation_rejected(system, prn, code, value):
    rinex = RinexData(3.04, logger=None)
    rinex.set_epoch_time(WEEK, TOW)

    assert not rinex.save_obs_data(system, prn, code, value)
    assert rinex.get_obs_data(0) is None


def test_rejected_observation_does_not_register_system():
    rinex = RinexData(3.04, logger=None)
    rinex.set_epoch_time(WEEK, TOW)

    assert not rinex.save_obs_data("E", 5, "C1C", 1e11)
    assert not rinex.save_obs_data("E", 5, "C5X", 1.0)
    assert not rinex.save_obs_data("E", 5, "C1C", 1.0, lol=10)
    assert rinex.registry.index("E") == -1


@pytest.mark.parametrize("week, tow, bias", [(2000, "x", 0.0), ("2000", 0.0, 0.0), (2000.5, 0.0, 0.0), (2000, 0.0, None)])
def test_wrong_type_of_epoch_time_rejected(week, tow, bias):
    rinex = RinexData(3.04, logger=None)
    tag = rinex.set_epoch_time(WEEK, TOW)

    assert rinex.set_epoch_time(week, tow, bias) is None
    assert rinex.get_epoch_time() == (tag, WEEK, TOW, 0.0, 0)


def test_rinex2_code_stored_as_rinex3_code():
    rinex = RinexData(3.04, logger=None)
    rinex.set_epoch_time(WEEK, TOW)

    assert rinex.save_obs_data("G", 5, "P2", 22492351.375)
    assert rinex.get_obs_data(0)[2] == "C2P"


def test_new_epoch_clears_observations():
    rinex = RinexData(3.04, logger=None)
    rinex.set_epoch_time(WEEK, TOW)
    rinex.save_obs_data("G", 5, "C1C", 22492348.344)

    tag = rinex.set_epoch_time(WEEK, TOW + 30, bias=0.5)

    assert rinex.get_obs_data(0) is None
    assert rinex.get_epoch_time() == (tag, WEEK, TOW + 30, 0.5, 0)


#
# Reading
#
def test_read_v3_file(rinex_v3, printed, text_file):
    """An epoch printed and read again gives the same observations"""
    rinex_v3.set_epoch_time(WEEK, TOW)
    rinex_v3.save_obs_data("G", 5, "C1C", 22492348.344, 0, 7)
    rinex_v3.save_obs_data("G", 5, "S1C", 45.0)
    rinex_v3.save_obs_data("R", 7, "L1C", 118199520.051, 1, 5)
    fid = _file_of(rinex_v3, printed, text_file, rinex_v3.print_obs_header, rinex_v3.print_obs_epoch)

    rinex = RinexData(3.04, logger=None)
    assert rinex.read_rinex_header(fid) == Label.EOH
    assert rinex.read_obs_epoch(fid) == ReadStatus.epoch_read
    assert rinex.read_obs_epoch(fid) == ReadStatus.end_of_file

    assert rinex.get_header_data(Label.INFILEVER) == (3.04, "O", "M")
    assert rinex.get_header_data(Label.MRKNAME) == ("TEST",)
    assert rinex.get_epoch_time()[1:] == (WEEK, TOW, 0.0, 0)
    assert [rinex.get_obs_data(idx) for idx in range(3)] == [
        ("G", 5, "C1C", 22492348.344, 0, 7),
        ("G", 5, "S1C", 45.0, 0, 0),
        ("R", 7, "L1C", 118199520.051, 1, 5),
    ]


def test_read_v2_file_into_v3_container(rinex_v2, printed, text_file):
    """A RINEX 2 file read into a RINEX 3 container is printed with RINEX 3 observation types"""
    rinex_v2.set_epoch_time(WEEK, TOW)
    rinex_v2.save_obs_data("G", 5, "C1C", 20000000.0, 0, 7)
    fid = _file_of(rinex_v2, printed, text_file, rinex_v2.print_obs_header, rinex_v2.print_obs_epoch)

    rinex = RinexData(3.04, logger=None)
    assert rinex.read_rinex_header(fid) == Label.EOH
    assert rinex.read_obs_epoch(fid) == ReadStatus.epoch_read
    assert rinex.get_obs_data(0) == ("G", 5, "C1C", 20000000.0, 0, 7)

    header = printed(rinex.print_obs_header)
    assert f"{'G    2 C1C L1C':60s}SYS / # / OBS TYPES" in header
    assert printed(rinex.print_obs_epoch) == ["> 2018 05 07 00 00  0.0000000  0  1", "G05  20000000.000 7"]


def test_scale_factor_removed_when_reading(rinex_v3, printed, text_file):
    rinex_v3.set_header_data(Label.SCALE, "G", 10, ["S1C"])
    rinex_v3.set_epoch_time(WEEK, TOW)
    rinex_v3.save_obs_data("G", 5, "S1C", 45.0)
    fid = _file_of(rinex_v3, printed, text_file, rinex_v3.print_obs_header, rinex_v3.print_obs_epoch)

    rinex = RinexData(3.04, logger=None)
    rinex.read_rinex_header(fid)
    rinex.read_obs_epoch(fid)

    assert rinex.get_obs_data(0) == ("G", 5, "S1C", 45.0, 0, 0)


def test_read_event_epoch(rinex_v3, printed, text_file):
    """Header records of an event epoch are stored in the container reading it"""
    header = printed(rinex_v3.print_obs_header)
    rinex_v3.set_epoch_time(WEEK, TOW + 30, flag=EpochFlag.header_info)
    rinex_v3.set_header_data(Label.ANTHEN, 0.1, 0.0, 0.0)
    fid = text_file(header + printed(rinex_v3.print_obs_epoch))

    rinex = RinexData(3.04, logger=None)
    rinex.read_rinex_header(fid)
    assert rinex.get_header_data(Label.ANTHEN) == (0.0, 0.0, 0.0)
    assert rinex.read_obs_epoch(fid) == ReadStatus.epoch_read

    assert rinex.get_header_data(Label.ANTHEN) == (0.1, 0.0, 0.0)
    assert rinex.get_epoch_time()[4] == 4


def test_invalid_epochs_are_skipped(rinex_v3, printed, text_file):
    """Epochs that cannot be decoded are discarded, and reading continues with the next epoch"""
    header = printed(rinex_v3.print_obs_header)
    fid = text_file(
        header
        + [
            "> 2018 05 07 00 00  0.0000000  0  1",
            "X05  22492348.344 7",
            "> 2018 05 07 00 00 10.0000000  4  0",
            "> 2018 05 07 00 00 20.0000000  0  2",
            "G05  22492348.344 7",
            "> 2018 05 07 00 00 30.0000000  0  1",
            "G07  22492349.344 7",
        ]
    )
    rinex = RinexData(3.04, logger=None)
    rinex.read_rinex_header(fid)

    assert rinex.read_obs_epoch(fid) == ReadStatus.epoch_error
    assert rinex.read_obs_epoch(fid) == ReadStatus.epoch_error
    assert rinex.read_obs_epoch(fid) == ReadStatus.epoch_error
    assert rinex.read_obs_epoch(fid) == ReadStatus.epoch_read
    assert rinex.get_epoch_time()[2] == TOW + 30
    assert rinex.get_obs_data(0) == ("G", 7, "C1C", 22492349.344, 0, 7)
    assert rinex.read_obs_epoch(fid) == ReadStatus.end_of_file


def test_read_epoch_before_header(text_file):
    rinex = RinexData(3.04, logger=None)

    assert rinex.read_obs_epoch(text_file(["> 2018 05 07 00 00  0.0000000  0  0"])) == ReadStatus.epoch_error


def test_clear_obs_data_keeps_epoch(rinex_v3):
    rinex_v3.set_epoch_time(WEEK, TOW, 0.5)
    rinex_v3.save_obs_data("G", 5, "C1C", 20000000.0)
    rinex_v3.clear_obs_data()

    assert rinex_v3.get_obs_data(0) is None
    assert rinex_v3.get_epoch_time()[1:4] == (WEEK, TOW, 0.5)


class _Pipe(io.StringIO):
    """In-memory file that can only be read forward"""

    def seekable(self):
        return False

    def tell(self):
        raise io.UnsupportedOperation("not seekable")

    def seek(self, *args):
        raise io.UnsupportedOperation("not seekable")


def test_read_from_stream_without_seek(rinex_v3, printed):
    """An epoch ending early leaves the next epoch line to be read, also from streams that cannot seek"""
    header = printed(rinex_v3.print_obs_header)
    lines = header + [
        "> 2018 05 07 00 00  0.0000000  0  2",
        "G05  22492348.344 7",
        "> 2018 05 07 00 00 30.0000000  0  1",
        "G07  22492349.344 7",
    ]
    fid = _Pipe("".join(line + "\n" for line in lines))
    rinex = RinexData(3.04, logger=None)

    assert rinex.read_rinex_header(fid) == Label.EOH
    assert rinex.read_obs_epoch(fid) == ReadStatus.epoch_error
    assert rinex.read_obs_epoch(fid) == ReadStatus.epoch_read
    assert rinex.get_epoch_time()[2] == TOW + 30
    assert rinex.get_obs_data(0) == ("G", 7, "C1C", 22492349.344, 0, 7)
    assert rinex.read_obs_epoch(fid) == ReadStatus.end_of_file
