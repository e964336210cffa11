"""A parser for reading header records of RINEX 2.10 and 3.04 files

Description:
------------

The :class:`HeaderParser` decodes header lines, one at a time, into records of a label and a payload in the shape
used by :meth:`~rinexdata.header.store.HeaderStore.set`. The same parser is used for the header of a file and for the
header records following special event epochs of observation files.

Records extending over several lines (like SYS / # / OBS TYPES) are collected until the next record starts, and
returned as one record. A line that cannot be decoded discards only the record it belongs to.

Example:
--------

    >>> parser = HeaderParser()
    >>> parser.parse("     3.04           OBSERVATION DATA    M                   RINEX VERSION / TYPE")
    >>> parser.take_records()
    [Record(label=<Label.INFILEVER: ...>, values=(3.04, 'O', 'M'))]

"""

# Standard library imports
from collections import namedtuple

# RinexData imports
from rinexdata.header import corrections
from rinexdata.header.labels import Label, label_to_id
from rinexdata.lib import exceptions
from rinexdata.lib import gnss
from rinexdata.lib.enums import RinexVersion
from rinexdata.parsers.parser import _float, _int, define_parser, parse_line, split_columns

Record = namedtuple("Record", ["label", "values"])

# Fields that are blank in continuation lines of records extending over several lines
_START_FIELDS = {
    "# / TYPES OF OBSERV": "num_types",
    "SYS / # / OBS TYPES": "sys",
    "SYS / SCALE FACTOR": "sys",
    "SYS / PHASE SHIFT": "sys",
    "GLONASS SLOT / FRQ #": "num_sats",
    "PRN / # OF OBS": "sat",
}


class HeaderParser:
    """Decode header lines into header records

    Attributes:
        version (RinexVersion):  Version of the file, set when RINEX VERSION / TYPE is read.
        file_type (str):         File type character of the file (O, N, G or H).
        sat_sys (str):           Satellite system of the file (M for mixed files).
        done (bool):             True when END OF HEADER has been read.
    """

    def __init__(self, version=None, file_type="", sat_sys=""):
        self.version = version
        self.file_type = file_type
        self.sat_sys = sat_sys
        self.done = False
        self.records = list()
        self.cache = dict(pending=None)
        self.parser = define_parser(label=self._label, parser_def=self.setup_parser_def())

    @staticmethod
    def _label(line, _):
        return " ".join(line[60:].split()).upper()

    def parse(self, line):
        """Parse one header line

        Complete records are collected in `records`, see :meth:`take_records`. Records extending over several lines
        are complete when the next record starts. They are collected before the new line is parsed, so that they are
        kept also when the new line is invalid.

        Args:
            line (str):  Header line, padded to 80 characters.
        """
        flush_error = None
        if self.cache["pending"] is not None and self._starts_record(line):
            try:
                self.records.extend(self.flush())
            except exceptions.RinexException as err:
                flush_error = err

        try:
            self.records.extend(parse_line(line, self.cache, self.parser) or [])
        except exceptions.RinexException:
            self.cache["pending"] = None
            raise
        if flush_error is not None:
            raise flush_error

    def take_records(self):
        """Return the complete records parsed since the last call"""
        records, self.records = self.records, list()
        return records

    def _starts_record(self, line):
        """Whether a line starts a new record instead of continuing the pending one"""
        label = self._label(line, self.cache)
        if label_to_id(label) != self.cache["pending"]["label"]:
            return True
        start, end = self.parser["parser_def"][label]["fields"][_START_FIELDS[label]]
        return bool(line[start:end].strip())

    def flush(self):
        """Return the pending multi-line record, if any"""
        pending, self.cache["pending"] = self.cache["pending"], None
        if pending is None:
            return []
        items = pending["items"]
        if pending["expected"] is not None and len(items) != pending["expected"]:
            raise exceptions.GrammarError(
                f"Mismatch in number of expected ({pending['expected']}) and existing ({len(items)}) items in "
                f"record {pending['label'].name}"
            )
        if pending["split"]:
            return [Record(pending["label"], item) for item in items]
        return [Record(pending["label"], pending["head"] + (items,))]

    def _start(self, label, head, items, expected, split=False):
        """Start a new multi-line record"""
        records = self.flush()
        self.cache["pending"] = dict(label=label, head=head, items=list(items), expected=expected, split=split)
        return records

    def _continue(self, label, items):
        """Add items of a continuation line to the pending record"""
        pending = self.cache["pending"]
        if pending is None or pending["label"] != label:
            raise exceptions.GrammarError(f"Continuation line of {label.name} not following a regular one")
        pending["items"].extend(items)

    def setup_parser_def(self):
        """Definition of the header parser

        The definitions follow the RINEX 2.10 and 3.04 documents. Records only defined in one of the versions are
        accepted in files of both versions.
        """
        xyz_fields = {"x": (0, 14), "y": (14, 28), "z": (28, 42)}
        epoch_fields = {
            "year": (0, 6),
            "month": (6, 12),
            "day": (12, 18),
            "hour": (18, 24),
            "minute": (24, 30),
            "second": (30, 43),
            "time_sys": (48, 51),
        }
        return {
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #      3.04           OBSERVATION DATA    M                   RINEX VERSION / TYPE
            "RINEX VERSION / TYPE": {
                "parser": self._parse_version_type,
                "fields": {"version": (0, 9), "file_type": (20, 21), "sat_sys": (40, 41)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # MAKERINEX 2.0.20023 BKG/GOWETTZELL      20160302 002000 UTC PGM / RUN BY / DATE
            "PGM / RUN BY / DATE": {
                "parser": self._parse_texts(Label.RUNBY),
                "fields": {"program": (0, 20), "run_by": (20, 40), "date": (40, 60)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # G = GPS R = GLONASS E = GALILEO S = GEO M = MIXED           COMMENT
            "COMMENT": {"parser": self._parse_texts(Label.COMM), "fields": {"comment": (0, 60)}},
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # STAS                                                        MARKER NAME
            "MARKER NAME": {"parser": self._parse_texts(Label.MRKNAME), "fields": {"marker_name": (0, 60)}},
            "MARKER NUMBER": {"parser": self._parse_texts(Label.MRKNUMBER), "fields": {"marker_number": (0, 20)}},
            "MARKER TYPE": {"parser": self._parse_texts(Label.MRKTYPE), "fields": {"marker_type": (0, 20)}},
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # SATREF              Norwegian Mapping Authority             OBSERVER / AGENCY
            "OBSERVER / AGENCY": {
                "parser": self._parse_texts(Label.AGENCY),
                "fields": {"observer": (0, 20), "agency": (20, 60)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # 3008040             SEPT POLARX4        2.9.0               REC # / TYPE / VERS
            "REC # / TYPE / VERS": {
                "parser": self._parse_texts(Label.RECEIVER),
                "fields": {"receiver_number": (0, 20), "receiver_type": (20, 40), "receiver_version": (40, 60)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # CR620012101         ASH701945C_M    SCIS                    ANT # / TYPE
            "ANT # / TYPE": {
                "parser": self._parse_texts(Label.ANTTYPE),
                "fields": {"antenna_number": (0, 20), "antenna_type": (20, 40)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #   3275756.7623   321111.1395  5445046.6477                  APPROX POSITION XYZ
            "APPROX POSITION XYZ": {"parser": self._parse_numbers(Label.APPXYZ), "fields": xyz_fields},
            #         0.0000        0.0000        0.0000                  ANTENNA: DELTA H/E/N
            "ANTENNA: DELTA H/E/N": {"parser": self._parse_numbers(Label.ANTHEN), "fields": xyz_fields},
            "ANTENNA: DELTA X/Y/Z": {"parser": self._parse_numbers(Label.ANTXYZ), "fields": xyz_fields},
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # G L1C   0.0000        0.0000        0.0000                  ANTENNA: PHASECENTER
            "ANTENNA: PHASECENTER": {
                "parser": self._parse_phase_center,
                "fields": {"sys": (0, 1), "code": (2, 5), "north": (5, 14), "east": (14, 28), "up": (28, 42)},
            },
            "ANTENNA: B.SIGHT XYZ": {"parser": self._parse_numbers(Label.ANTBS), "fields": xyz_fields},
            "ANTENNA: ZERODIR AZI": {"parser": self._parse_numbers(Label.ANTZDAZI), "fields": {"azimuth": (0, 14)}},
            "ANTENNA: ZERODIR XYZ": {"parser": self._parse_numbers(Label.ANTZDXYZ), "fields": xyz_fields},
            "CENTER OF MASS: XYZ": {"parser": self._parse_numbers(Label.COFM), "fields": xyz_fields},
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #      2     1     3    G14   G15   G16                       WAVELENGTH FACT L1/2
            "WAVELENGTH FACT L1/2": {
                "parser": self._parse_wavelength_fact,
                "fields": {"l1": (0, 6), "l2": (6, 12), "num_sats": (12, 18), "sats": (18, 60)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #      5    C1    L1    L2    P2    S1                        # / TYPES OF OBSERV
            "# / TYPES OF OBSERV": {
                "parser": self._parse_types_of_observ,
                "fields": {"num_types": (0, 6), "types": (6, 60)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # G   26 C1C C1P L1C L1P D1C D1P S1C S1P C2P C2W C2S C2L C2X  SYS / # / OBS TYPES
            #        L2P L2W L2S L2L L2X D2P D2W D2S D2L D2X S2P S2W S2S  SYS / # / OBS TYPES
            "SYS / # / OBS TYPES": {
                "parser": self._parse_sys_obs_types,
                "fields": {"sys": (0, 1), "num_types": (3, 6), "types": (6, 58)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # DBHZ                                                        SIGNAL STRENGTH UNIT
            "SIGNAL STRENGTH UNIT": {"parser": self._parse_texts(Label.SIGU), "fields": {"unit": (0, 20)}},
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #      1.000                                                  INTERVAL
            "INTERVAL": {"parser": self._parse_numbers(Label.INT), "fields": {"interval": (0, 10)}},
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #   2016    03    01    00    00   00.0000000     GPS         TIME OF FIRST OBS
            "TIME OF FIRST OBS": {"parser": self._parse_obs_time(Label.TOFO), "fields": epoch_fields},
            "TIME OF LAST OBS": {"parser": self._parse_obs_time(Label.TOLO), "fields": epoch_fields},
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #      0                                                      RCV CLOCK OFFS APPL
            "RCV CLOCK OFFS APPL": {"parser": self._parse_integer(Label.CLKOFFS), "fields": {"applied": (0, 6)}},
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # G CC2NONCC           ftp://igs.org/pub/DCB                  SYS / DCBS APPLIED
            "SYS / DCBS APPLIED": {
                "parser": self._parse_texts(Label.DCBS),
                "fields": {"sys": (0, 1), "program": (2, 19), "source": (20, 60)},
            },
            "SYS / PCVS APPLIED": {
                "parser": self._parse_texts(Label.PCVS),
                "fields": {"sys": (0, 1), "program": (2, 19), "source": (20, 60)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # G  100  4 C1C L1C D1C S1C                                   SYS / SCALE FACTOR
            "SYS / SCALE FACTOR": {
                "parser": self._parse_scale_factor,
                "fields": {"sys": (0, 1), "factor": (2, 6), "num_types": (8, 10), "types": (10, 58)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # G L2X -0.25000  2 G01 G02                                   SYS / PHASE SHIFT
            "SYS / PHASE SHIFT": {
                "parser": self._parse_phase_shift,
                "fields": {
                    "sys": (0, 1),
                    "code": (2, 5),
                    "correction": (6, 14),
                    "num_sats": (16, 18),
                    "sats": (18, 58),
                },
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #  22 R01  1 R02 -4 R03  5 R04  6 R05  1 R06 -4 R07  5 R08  6 GLONASS SLOT / FRQ #
            "GLONASS SLOT / FRQ #": {
                "parser": self._parse_glonass_slot,
                "fields": {"num_sats": (0, 3), "slots": (4, 60)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #  C1C  -10.000 C1P  -10.123 C2C  -10.432 C2P  -10.634        GLONASS COD/PHS/BIS
            "GLONASS COD/PHS/BIS": {"parser": self._parse_glonass_bias, "fields": {"biases": (0, 52)}},
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #     18    18  1929     7GPS                                 LEAP SECONDS
            "LEAP SECONDS": {
                "parser": self._parse_leap_seconds,
                "fields": {
                    "leap_seconds": (0, 6),
                    "future": (6, 12),
                    "week": (12, 18),
                    "day": (18, 24),
                    "sys": (24, 27),
                },
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #     32                                                      # OF SATELLITES
            "# OF SATELLITES": {"parser": self._parse_integer(Label.SATS), "fields": {"num_sats": (0, 6)}},
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #    G01  2875  2875  2875  2875  2875  2875  2875  2875  2875PRN / # OF OBS
            "PRN / # OF OBS": {"parser": self._parse_prn_obs, "fields": {"sat": (3, 6), "counts": (6, 60)}},
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #     0.1676D-07  0.2235D-07 -0.1192D-06 -0.1192D-06          ION ALPHA
            "ION ALPHA": {"parser": self._parse_ion_v2(Label.IONA), "fields": _iono_v2_fields()},
            "ION BETA": {"parser": self._parse_ion_v2(Label.IONB), "fields": _iono_v2_fields()},
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # GPSA   7.4506E-09  1.4901E-08 -5.9605E-08 -1.1921E-07       IONOSPHERIC CORR
            "IONOSPHERIC CORR": {
                "parser": self._parse_ionospheric_corr,
                "fields": {
                    "type": (0, 4),
                    "p0": (5, 17),
                    "p1": (17, 29),
                    "p2": (29, 41),
                    "p3": (41, 53),
                    "time_mark": (54, 55),
                    "sv": (56, 58),
                },
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #    -0.186264514923D-08-0.532907051820D-14   405504     1855 DELTA-UTC: A0,A1,T,W
            "DELTA-UTC: A0,A1,T,W": {
                "parser": self._parse_delta_utc,
                "fields": {"a0": (3, 22), "a1": (22, 41), "ref_time": (41, 50), "ref_week": (50, 59)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #   2016     3     1    0.000000000000D+00                    CORR TO SYSTEM TIME
            "CORR TO SYSTEM TIME": {
                "parser": self._parse_corr_to_system_time,
                "fields": {"year": (0, 6), "month": (6, 12), "day": (12, 18), "tau_c": (21, 40)},
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #  0.133179128170D-06 0.107469588780D-12 552960  1855 EGNOS  2D-UTC A0,A1,T,W,S,U
            "D-UTC A0,A1,T,W,S,U": {
                "parser": self._parse_geo_utc,
                "fields": {
                    "a0": (0, 19),
                    "a1": (19, 38),
                    "ref_time": (38, 45),
                    "ref_week": (45, 50),
                    "source": (51, 56),
                    "utc_id": (57, 59),
                },
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            # GPUT -5.5879354477E-09-1.598721155E-14 503808 1855 G10  2   TIME SYSTEM CORR
            "TIME SYSTEM CORR": {
                "parser": self._parse_time_system_corr,
                "fields": {
                    "type": (0, 4),
                    "a0": (5, 22),
                    "a1": (22, 38),
                    "ref_time": (38, 45),
                    "ref_week": (45, 50),
                    "source": (51, 56),
                    "utc_id": (57, 59),
                },
            },
            # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
            #                                                             END OF HEADER
            "END OF HEADER": {"parser": self._parse_end_of_header, "fields": {}},
        }

    #
    # PARSERS
    #
    def _parse_version_type(self, line, _):
        """Parse entries of RINEX header `RINEX VERSION / TYPE`"""
        number = _float(line["version"])
        self.version = RinexVersion.from_number(number)
        if self.version == RinexVersion.tbd:
            raise exceptions.RangeError(f"RINEX version {number} cannot be handled")
        self.file_type = line["file_type"][:1].upper() or " "
        if self.version == RinexVersion.v210 and self.file_type in gnss.V2_NAV_TYPES:
            self.sat_sys = gnss.V2_NAV_TYPES[self.file_type]
        else:
            self.sat_sys = line["sat_sys"][:1] or "G"
        return [Record(Label.INFILEVER, (number, self.file_type, self.sat_sys))]

    @staticmethod
    def _parse_texts(label):
        """Parser of records holding only text fields, in the order of the fields"""

        def _parse(line, _):
            return [Record(label, tuple(line.values()))]

        return _parse

    @staticmethod
    def _parse_numbers(label):
        """Parser of records holding only floating point fields, in the order of the fields"""

        def _parse(line, _):
            return [Record(label, tuple(_float(v) for v in line.values()))]

        return _parse

    @staticmethod
    def _parse_integer(label):
        def _parse(line, _):
            (value,) = line.values()
            return [Record(label, (_int(value),))]

        return _parse

    def _parse_phase_center(self, line, _):
        """Parse entries of RINEX header `ANTENNA: PHASECENTER`"""
        return [
            Record(
                Label.ANTPHC,
                (line["sys"] or " ", line["code"], _float(line["north"]), _float(line["east"]), _float(line["up"])),
            )
        ]

    def _parse_wavelength_fact(self, line, _):
        """Parse entries of RINEX header `WAVELENGTH FACT L1/2`

        A record without satellites gives the default wavelength factors.
        """
        sats = ["G" + s if s[0].isdigit() else s for s in split_columns(line["sats"], 6) if s]
        if len(sats) != _int(line["num_sats"], default=0):
            raise exceptions.GrammarError("Mismatch in number of satellites in WAVELENGTH FACT L1/2")
        return [Record(Label.WVLEN, (_int(line["l1"]), _int(line["l2"], default=0), sats))]

    def _parse_types_of_observ(self, line, _):
        """Parse entries of RINEX header `# / TYPES OF OBSERV`

        The observation types are given in the RINEX 2 codes of the file. They apply to all systems of the file.
        """
        types = [t for t in split_columns(line["types"], 6) if t]
        if line["num_types"]:
            return self._start(Label.TOBS, (self.sat_sys or "G",), types, _int(line["num_types"]))
        self._continue(Label.TOBS, types)
        return []

    def _parse_sys_obs_types(self, line, _):
        """Parse entries of RINEX header `SYS / # / OBS TYPES`"""
        types = [t for t in split_columns(line["types"], 4) if t]
        if line["sys"]:
            return self._start(Label.SYS, (line["sys"],), types, _int(line["num_types"]))
        self._continue(Label.SYS, types)
        return []

    def _parse_obs_time(self, label):
        """Parser of `TIME OF FIRST OBS` and `TIME OF LAST OBS`, giving GPS week and time of week"""

        def _parse(line, _):
            try:
                date = gnss.make_datetime(
                    _int(line["year"]),
                    _int(line["month"]),
                    _int(line["day"]),
                    _int(line["hour"]),
                    _int(line["minute"]),
                    _float(line["second"]),
                )
            except ValueError:
                raise exceptions.GrammarError(f"Invalid date in {label.name}") from None
            week, tow = gnss.datetime_to_gps(date)
            letter = gnss.time_system_letter(line["time_sys"]) if line["time_sys"] else self._time_letter()
            return [Record(label, (week, tow, letter))]

        return _parse

    def _time_letter(self):
        """Time system of a file without explicit time system: the system of single system files, else GPS"""
        return self.sat_sys if self.sat_sys in gnss.SYSTEMS and self.sat_sys != "S" else "G"

    def _parse_scale_factor(self, line, _):
        """Parse entries of RINEX header `SYS / SCALE FACTOR`

        A record without observation types applies to all observation types of the system.
        """
        types = [t for t in split_columns(line["types"], 4) if t]
        if line["sys"]:
            head = (line["sys"], _int(line["factor"]))
            return self._start(Label.SCALE, head, types, _int(line["num_types"], default=0))
        self._continue(Label.SCALE, types)
        return []

    def _parse_phase_shift(self, line, _):
        """Parse entries of RINEX header `SYS / PHASE SHIFT`

        A record without satellites applies to all satellites of the system.
        """
        sats = [s for s in split_columns(line["sats"], 4) if s]
        if line["sys"]:
            head = (line["sys"], line["code"], _float(line["correction"]))
            return self._start(Label.PHSH, head, sats, _int(line["num_sats"], default=0))
        self._continue(Label.PHSH, sats)
        return []

    def _parse_glonass_slot(self, line, _):
        """Parse entries of RINEX header `GLONASS SLOT / FRQ #`, one record per satellite"""
        slots = list()
        for entry in split_columns(line["slots"], 7):
            if entry:
                slots.append((_int(entry[1:3]), _int(entry[3:])))
        if line["num_sats"]:
            return self._start(Label.GLSLT, (), slots, _int(line["num_sats"]), split=True)
        self._continue(Label.GLSLT, slots)
        return []

    def _parse_glonass_bias(self, line, _):
        """Parse entries of RINEX header `GLONASS COD/PHS/BIS`, one record per observation type"""
        records = list()
        for entry in split_columns(line["biases"], 13):
            if entry:
                code, _, bias = entry.partition(" ")
                records.append(Record(Label.GLPHS, (code, _float(bias.strip()))))
        return records

    def _parse_leap_seconds(self, line, _):
        """Parse entries of RINEX header `LEAP SECONDS`"""
        sys_letter = {"BDS": "C", "GPS": "G"}.get(line["sys"], " ")
        return [
            Record(
                Label.LEAP,
                (
                    _int(line["leap_seconds"]),
                    _int(line["future"], default=0),
                    _int(line["week"], default=0),
                    _int(line["day"], default=0),
                    sys_letter,
                ),
            )
        ]

    def _parse_prn_obs(self, line, _):
        """Parse entries of RINEX header `PRN / # OF OBS`"""
        counts = [_int(c) for c in split_columns(line["counts"], 6) if c]
        if line["sat"]:
            letter = line["sat"][0] if line["sat"][0].isalpha() else "G"
            return self._start(Label.PRNOBS, (letter, _int(line["sat"].lstrip("GRESJCI"))), counts, None)
        self._continue(Label.PRNOBS, counts)
        return []

    @staticmethod
    def _parse_ion_v2(label):
        """Parser of RINEX 2 records `ION ALPHA` and `ION BETA`"""

        def _parse(line, _):
            return [Record(label, ([_float(line[f"p{idx}"]) for idx in range(4)],))]

        return _parse

    def _parse_ionospheric_corr(self, line, _):
        """Parse entries of RINEX header `IONOSPHERIC CORR`

        The time mark is given as a letter A-X for the hour of transmission, stored as 0-23 (-1 if blank).
        """
        corr_type = self._correction_type(line["type"], "IONC_")
        mark = ord(line["time_mark"].upper()) - ord("A") if line["time_mark"] else -1
        params = [_float(line[f"p{idx}"]) for idx in range(4)]
        return [Record(Label.IONC, (corr_type, params, mark, _int(line["sv"], default=0)))]

    def _parse_delta_utc(self, line, _):
        """Parse entries of RINEX 2 header `DELTA-UTC: A0,A1,T,W`"""
        return [
            Record(
                Label.DUTC,
                (_float(line["a0"]), _float(line["a1"]), _int(line["ref_time"]), _int(line["ref_week"])),
            )
        ]

    def _parse_corr_to_system_time(self, line, _):
        """Parse entries of RINEX 2 header `CORR TO SYSTEM TIME`"""
        return [
            Record(
                Label.CORRT,
                (_int(line["year"]), _int(line["month"]), _int(line["day"]), _float(line["tau_c"])),
            )
        ]

    def _parse_geo_utc(self, line, _):
        """Parse entries of RINEX 2 header `D-UTC A0,A1,T,W,S,U`"""
        return [
            Record(
                Label.GEOT,
                (
                    _float(line["a0"]),
                    _float(line["a1"]),
                    _int(line["ref_time"]),
                    _int(line["ref_week"]),
                    line["source"],
                    _int(line["utc_id"], default=0),
                ),
            )
        ]

    def _parse_time_system_corr(self, line, _):
        """Parse entries of RINEX header `TIME SYSTEM CORR`

        The source is kept as a numeric identifier, see :mod:`rinexdata.header.corrections`.
        """
        corr_type = self._correction_type(line["type"], "TIMC_")
        params = [
            _float(line["a0"]),
            _float(line["a1"]),
            _int(line["ref_time"], default=0),
            _int(line["ref_week"], default=0),
        ]
        source = corrections.source_id(line["source"], corr_type)
        return [Record(Label.TIMC, (corr_type, params, _int(line["utc_id"], default=0), source))]

    def _parse_end_of_header(self, _line, _):
        self.done = True
        return self.flush()

    @staticmethod
    def _correction_type(text, prefix):
        corr_type = label_to_id(text)
        if not corr_type.name.startswith(prefix):
            raise exceptions.GrammarError(f"Unknown correction type {text!r}")
        return corr_type


def _iono_v2_fields():
    # ----+----1----+----2----+----3----+----4----+----5----+----6
    #     0.1676D-07  0.2235D-07 -0.1192D-06 -0.1192D-06
    return {"p0": (2, 14), "p1": (14, 26), "p2": (26, 38), "p3": (38, 50)}
