"""Common functions for all tests

"""

# Standard library imports
import io

# Third party imports
import pytest

# RinexData imports
from rinexdata.data import RinexData
from rinexdata.header.labels import Label

# Start of GPS week 2000 plus one day, 2018-05-07 00:00:00
WEEK, TOW = 2000, 86400.0


def _set_site_records(rinex):
    """Obligatory header records describing the site, common to both versions"""
    rinex.set_header_data(Label.MRKNAME, "TEST")
    rinex.set_header_data(Label.AGENCY, "OPERATOR", "NMA")
    rinex.set_header_data(Label.RECEIVER, "3008040", "SEPT POLARX4", "2.9.0")
    rinex.set_header_data(Label.ANTTYPE, "CR620012101", "ASH701945C_M    SCIS")
    rinex.set_header_data(Label.APPXYZ, 3275756.7623, 321111.1395, 5445046.6477)
    rinex.set_header_data(Label.ANTHEN, 0.0, 0.0, 0.0)
    rinex.set_header_data(Label.TOFO, WEEK, TOW, "G")


@pytest.fixture
def rinex_v2():
    """A RINEX 2.10 container with a complete GPS observation header"""
    rinex = RinexData(2.10, program="rinexdata", run_by="NMA", logger=None)
    _set_site_records(rinex)
    rinex.set_header_data(Label.TOBS, "G", ["C1", "L1"])
    return rinex


@pytest.fixture
def rinex_v3():
    """A RINEX 3.04 container with a complete GPS and GLONASS observation header"""
    rinex = RinexData(3.04, program="rinexdata", run_by="NMA", logger=None)
    _set_site_records(rinex)
    rinex.set_header_data(Label.SYS, "G", ["C1C", "L1C", "S1C"])
    rinex.set_header_data(Label.SYS, "R", ["C1C", "L1C"])
    return rinex


@pytest.fixture
def printed():
    """Run a print operation against an in-memory file and return the lines written"""
    return _printed


def _printed(print_function):
    fid = io.StringIO()
    print_function(fid)
    return fid.getvalue().splitlines()


@pytest.fixture
def text_file():
    """In-memory file with the given lines, for the read operations"""
    return _text_file


def _text_file(lines):
    return io.StringIO("".join(line + "\n" for line in lines))


@pytest.fixture
def header_line():
    """A header line with the label text in columns 61-80"""
    return _header_line


def _header_line(body, label):
    return f"{body:60s}{label}"
