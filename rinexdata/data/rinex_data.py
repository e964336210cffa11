"""A container for the data of one RINEX observation or navigation file

Description:
------------

A :class:`RinexData` container holds the header records of one file, the observation samples of the current epoch
and buffered navigation records. It is created for one RINEX version, which is the version files are written in.
Files of both versions can be read into a container, so that reading a file and printing it from the same container
converts the file between RINEX 2.10 and 3.04.

All operations report errors through the log and an explicit return value: `False` or `None` for failed operations,
:class:`~rinexdata.lib.enums.ReadStatus` for epoch reads, and a pseudo label for header reads. The caller opens and
closes the files.

Example:
--------

    >>> from rinexdata.data import RinexData
    >>> rinex = RinexData(3.04)
    >>> with open("stas0610.16o", mode="rt") as fid_in, open("STAS.rnx", mode="wt") as fid_out:
    ...     if rinex.read_rinex_header(fid_in) == Label.EOH and rinex.print_obs_header(fid_out):
    ...         while rinex.read_obs_epoch(fid_in) != ReadStatus.end_of_file:
    ...             rinex.print_obs_epoch(fid_out)

"""

# RinexData imports
from rinexdata import epochs
from rinexdata import filters
from rinexdata import naming
from rinexdata import parsers
from rinexdata import systems
from rinexdata import writers
from rinexdata.header import labels
from rinexdata.header.labels import Label
from rinexdata.header.store import HeaderStore
from rinexdata.lib import config
from rinexdata.lib import exceptions
from rinexdata.lib import gnss
from rinexdata.lib import log
from rinexdata.lib.enums import EpochFlag, FileType, ReadStatus, RinexVersion
from rinexdata.parsers.parser import LineReader
from rinexdata.parsers.rinex_header import HeaderParser
from rinexdata.writers import rinex_header

# Labels never carried by the header records of special event epochs
_NOT_IN_EVENTS = frozenset((Label.VERSION, Label.RUNBY, Label.COMM, Label.EOH))

# Systems declared by a RINEX 2 observation file of mixed type
_V2_MIXED_SYSTEMS = ("G", "R", "E", "S")


def _rinex_version(version):
    """RINEX version of a container from a version enum or a version number"""
    if isinstance(version, RinexVersion):
        rinex_version = version
    else:
        try:
            number = float(version)
        except (TypeError, ValueError):
            raise exceptions.InitializationError(f"Unknown RINEX version {version!r}") from None
        rinex_version = RinexVersion.from_number(number)
        if rinex_version.number != number:
            raise exceptions.InitializationError(f"RINEX version {version!r} is not written, use 2.10 or 3.04")
    if rinex_version not in (RinexVersion.v210, RinexVersion.v304):
        raise exceptions.InitializationError(f"Unknown RINEX version {version!r}")
    return rinex_version


class RinexData:
    """Header records and epoch data of one RINEX file

    Args:
        version:         Version of the files to write, a RinexVersion or a version number like 2.10.
        program (str):   Program name of the PGM / RUN BY / DATE record, taken from the configuration if None.
        run_by (str):    Agency of the PGM / RUN BY / DATE record, taken from the configuration if None.
        logger:          Log receiving the diagnostics, None to discard them.

    Raises:
        InitializationError:  If the version is not 2.10 or 3.04.
    """

    def __init__(self, version, program=None, run_by=None, logger=log):
        self.version = _rinex_version(version)
        self.log = log.SilentLog() if logger is None else logger
        program = config.setting("program", default="rinexdata") if program is None else program
        run_by = config.setting("run_by") if run_by is None else run_by

        self.registry = systems.SystemRegistry(self.version)
        self.header = HeaderStore(self.version, self.registry, program, run_by)
        self.epoch = epochs.EpochContext()
        self.observations = epochs.ObservationBuffer()
        self.navigation = epochs.NavigationBuffer()
        self.window = filters.TimeWindow()

        # State of the file being read
        self._input = None
        self._reader = None
        self._in_version = None
        self._in_file_type = ""
        self._in_sat_sys = ""
        self._in_obs_types = None
        self._nav_sys = None

    def __repr__(self):
        return f"{type(self).__name__}({self.version.number:4.2f}, program={self.header.program!r})"

    #
    # HEADER RECORDS
    #
    def set_header_data(self, label, *values):
        """Store the payload of a header record

        Args:
            label:   Label of the record, as Label or label text.
            values:  Payload in the shape of the label, see :mod:`rinexdata.header.payloads`.

        Returns:
            True if the payload is stored, False if it is rejected. A rejected payload does not change the header.
        """
        label = self._label(label)
        try:
            self.header.set(label, *values)
        except exceptions.RinexException as err:
            self.log.error(f"Header record {labels.id_to_label(label)!r} not set: {err}")
            return False
        return True

    def get_header_data(self, label, index=0):
        """Payload of a header record, None if the record has no data

        For records holding several payloads, the index selects the payload. `Label.INFILEVER` gives the version,
        file type and system of the last file header read.
        """
        label = self._label(label)
        if label == Label.INFILEVER:
            return self._input
        if not Label.VERSION <= label <= Label.EOH:
            return None
        return self.header.get(label, index)

    def labels(self):
        """Cursor over the labels with data, in print order"""
        return self.header.cursor()

    def clear_header_data(self):
        """Remove all header data, except the version and program identity of the container"""
        self.header.clear()

    @staticmethod
    def label_to_id(text):
        return labels.label_to_id(text)

    @staticmethod
    def id_to_label(label):
        try:
            return labels.id_to_label(label)
        except ValueError:
            return labels.id_to_label(Label.NOLABEL)

    def _label(self, label):
        if isinstance(label, str):
            return labels.label_to_id(label)
        try:
            return Label(label)
        except ValueError:
            return Label.NOLABEL

    #
    # SELECTION
    #
    def set_filter(self, sel_sat=(), sel_obs=(), start=None, end=None):
        """Set the selection used when filtering data

        Args:
            sel_sat (list):  Satellite selectors, like 'G' (all GPS satellites) or 'G05'.
            sel_obs (list):  Observable selectors, like 'C1C' (all systems), 'GC1C' (one system) or 'C1' (RINEX 2).
            start (float):   First accepted time tag, None for no limit.
            end (float):     Last accepted time tag, None for no limit.

        Returns:
            True if the selection is set, False if a selector is invalid. Invalid selectors leave the selection
            unchanged.
        """
        try:
            for limit in (start, end):
                if limit is not None:
                    epochs.check_number(limit, "Time window limit")
            self.registry.set_filter(sel_sat, sel_obs)
        except exceptions.RinexException as err:
            self.log.error(f"Selection not set: {err}")
            return False
        self.window = filters.TimeWindow(start, end)
        return True

    def filter_obs_data(self, remove_not_printable=False):
        """Remove observation samples of the current epoch not passing the selection

        Returns:
            True if samples remain in the epoch.
        """
        num_removed = filters.filter_observations(
            self.observations, self.registry, self.epoch.time_tag, self.window, remove_not_printable
        )
        self.log.debug(f"Removed {num_removed} observations, {len(self.observations)} left")
        return len(self.observations) > 0

    def filter_nav_data(self):
        """Remove navigation records not passing the selection

        Returns:
            True if records remain.
        """
        num_removed = filters.filter_navigation(self.navigation, self.registry, self.window)
        self.log.debug(f"Removed {num_removed} navigation records, {len(self.navigation)} left")
        return len(self.navigation) > 0

    #
    # OBSERVATION DATA
    #
    def set_epoch_time(self, week, tow, bias=0.0, flag=EpochFlag.ok):
        """Start a new observation epoch, removing the samples of the previous one

        Args:
            week (int):    GPS week.
            tow (float):   Time of week in seconds.
            bias (float):  Receiver clock offset in seconds.
            flag (int):    Epoch flag, 0-6.

        Returns:
            Float: Time tag of the epoch, None if the epoch is rejected.
        """
        try:
            time_tag = self.epoch.set(week, tow, bias, flag)
        except exceptions.RinexException as err:
            self.log.error(f"Epoch not set: {err}")
            return None
        self.observations.clear()
        return time_tag

    def get_epoch_time(self):
        """Time tag, week, time of week, clock offset and flag of the current epoch"""
        return self.epoch.as_tuple()

    def save_obs_data(self, system, prn, code, value, lol=0, strength=0, time_tag=None):
        """Store an observation of the current epoch

        Args:
            system (str):     System identifier, like 'G'.
            prn (int):        Satellite number.
            code (str):       Observable, as RINEX 3 code or as RINEX 2 code.
            value (float):    Observed value.
            lol (int):        Loss of lock indicator, 0-9.
            strength (int):   Signal strength indicator, 0-9.
            time_tag (float): Time tag of the epoch the observation belongs to, defaults to the current epoch.

        Returns:
            True if the observation is stored.
        """
        try:
            self._save_sample(system, prn, code, value, lol, strength)
        except exceptions.RinexException as err:
            self.log.error(f"Observation {code!r} of satellite {system}{prn} not saved: {err}")
            return False
        if time_tag is not None and time_tag != self.epoch.time_tag:
            self.log.debug(f"Observation of time tag {time_tag} saved in epoch {self.epoch.time_tag}")
        return True

    def _save_sample(self, system, prn, code, value, lol, strength):
        systems.check_satellite(system, prn)
        if not isinstance(code, str) or len(code) not in (2, 3):
            raise exceptions.ShapeError(f"Observable {code!r} is not a RINEX 2 or RINEX 3 code")
        if len(code) == 2:
            v3_code = systems.to_v3(code)
            if v3_code is None:
                raise exceptions.RangeError(f"Observable {code!r} cannot be translated to RINEX 3")
            code = v3_code
        epochs.check_obs_value(value)
        lol = epochs.check_indicator(lol, "Loss of lock")
        strength = epochs.check_indicator(strength, "Signal strength")

        if self.registry.index(system) < 0 and code not in systems.V3_OBS_TYPES:
            raise exceptions.RangeError(f"Observable {code!r} is not defined for system {system!r}")
        obs_index = self.registry.get(system, create=True).index(code)
        sample = epochs.ObservationSample(self.registry.index(system), prn, obs_index, float(value), lol, strength)
        self.observations.add(sample)

    def get_obs_data(self, index):
        """Observation of the current epoch, in buffer order

        Returns:
            Tuple with system, satellite number, RINEX 3 code, value, loss of lock and signal strength indicators.
            None if there is no observation with the given index.
        """
        if not 0 <= index < len(self.observations):
            return None
        sample = self.observations[index]
        system = self.registry[sample.system_index]
        return (
            system.letter,
            sample.prn,
            system.obs_types[sample.obs_index].code,
            sample.value,
            sample.lol,
            sample.strength,
        )

    def clear_obs_data(self):
        self.observations.clear()

    #
    # NAVIGATION DATA
    #
    def save_nav_data(self, system, prn, orbit, time_tag):
        """Store a navigation record

        Args:
            system (str):        System identifier, like 'G'.
            prn (int):           Satellite number.
            orbit (array_like):  Broadcast orbit, 4 values per line for the lines of the system.
            time_tag (float):    Time tag of the record, see :func:`rinexdata.lib.gnss.nav_time_tag`.

        Returns:
            True if the record is stored.
        """
        try:
            systems.check_satellite(system, prn)
            block = epochs.make_orbit(system, orbit)
            time_tag = float(epochs.check_number(time_tag, "Time tag"))
            self.navigation.add(epochs.NavigationRecord(time_tag, system, prn, block))
        except exceptions.RinexException as err:
            self.log.error(f"Navigation record of satellite {system}{prn} not saved: {err}")
            return False
        return True

    def get_nav_data(self, index):
        """Navigation record in buffer order

        Returns:
            Tuple with system, satellite number, broadcast orbit (8x4 array) and time tag. None if there is no record
            with the given index.
        """
        if not 0 <= index < len(self.navigation):
            return None
        record = self.navigation[index]
        return record.system, record.prn, record.orbit.copy(), record.time_tag

    def has_nav_epochs(self, system=None):
        """Whether navigation records are buffered, for the given system or for any system"""
        if system is None:
            return len(self.navigation) > 0
        return system in self.navigation.systems()

    def clear_nav_data(self):
        self.navigation.clear()

    #
    # PRINTING
    #
    def print_obs_header(self, fid):
        """Write the header of an observation file

        Returns:
            True if the header is written. False if obligatory records are missing, then nothing is written and
            epochs should not be printed.
        """
        try:
            self._check_obligatory(FileType.observation)
            printed = [s.letter for s in self.registry.printed_systems()]
            sat_sys = printed[0] if len(printed) == 1 else "M"
            lines = rinex_header.header_lines(self.header, self.version, FileType.observation, sat_sys)
        except exceptions.RinexException as err:
            self.log.error(f"Observation header not printed: {err}")
            return False
        self._write_lines(fid, lines)
        self.header.take_changes()
        self.header.take_new_comments()
        self.log.info(f"Printed RINEX {self.version.number:4.2f} observation header, {len(lines)} lines")
        return True

    def print_obs_epoch(self, fid):
        """Write the current epoch to an observation file

        Special event epochs (flags 2-5) are written with the header records set since the last print.

        Returns:
            True if the epoch is written.
        """
        try:
            if self.epoch.flag.has_header_records:
                kwargs = dict(header_lines=self._event_lines())
            else:
                kwargs = dict(satellites=self._output_satellites())
        except exceptions.RinexException as err:
            self.log.error(f"Epoch {self.epoch.datetime} not printed: {err}")
            return False

        if not any(kwargs.values()) and self.epoch.flag == EpochFlag.ok:
            self.log.debug(f"No observations to print in epoch {self.epoch.datetime}")
            return True
        writers.write_epoch(
            self.version,
            FileType.observation,
            fid,
            date=self.epoch.datetime if self.epoch.time_tag else None,
            flag=int(self.epoch.flag),
            bias=self.epoch.bias,
            **kwargs,
        )
        return True

    def print_obs_eof(self, fid):
        """End an observation file with a header information event holding an END OF FILE comment"""
        lines = rinex_header.record_lines(Label.COMM, [("END OF FILE",)], self.version)
        writers.write_epoch(
            self.version,
            FileType.observation,
            fid,
            date=None,
            flag=int(EpochFlag.header_info),
            bias=0.0,
            header_lines=lines,
        )
        self.log.info("Printed end of observation file")
        return True

    def print_nav_header(self, fid):
        """Write the header of a navigation file

        RINEX 2 navigation files hold the records of one system. The system is the first of GPS, GLONASS and SBAS
        with buffered records, or selected if no records are buffered.

        Returns:
            True if the header is written.
        """
        try:
            self._check_obligatory(FileType.navigation)
            self._nav_sys = self._navigation_system()
            lines = rinex_header.header_lines(self.header, self.version, FileType.navigation, self._nav_sys)
        except exceptions.RinexException as err:
            self.log.error(f"Navigation header not printed: {err}")
            return False
        self._write_lines(fid, lines)
        self.header.take_changes()
        self.header.take_new_comments()
        self.log.info(f"Printed RINEX {self.version.number:4.2f} navigation header, {len(lines)} lines")
        return True

    def print_nav_epochs(self, fid):
        """Write all buffered navigation records in time order, and empty the buffer

        RINEX 2 files take the records of the system of the navigation header. Without a printed header the system
        is found as in :meth:`print_nav_header`.

        Returns:
            True if all records are written.
        """
        nav_sys = self._nav_sys
        if self.version == RinexVersion.v210 and nav_sys is None:
            try:
                nav_sys = self._navigation_system()
            except exceptions.RinexException as err:
                self.log.error(f"Navigation records not printed: {err}")
                return False

        all_written = True
        for record in self.navigation:
            if self.version == RinexVersion.v210 and nav_sys != record.system:
                self.log.warn(
                    f"Navigation record of {systems.satellite_id(record.system, record.prn)} not printed in RINEX 2 "
                    f"file of system {nav_sys!r}"
                )
                all_written = False
                continue
            writers.write_epoch(
                self.version,
                FileType.navigation,
                fid,
                system=record.system,
                prn=record.prn,
                date=gnss.nav_datetime(record.system, record.time_tag),
                orbit=record.orbit,
            )
        self.navigation.clear()
        return all_written

    def _check_obligatory(self, file_type):
        missing = self.header.missing(file_type)
        if missing:
            tokens = ", ".join(labels.id_to_label(lbl) for lbl in missing)
            raise exceptions.SchemaError(f"Obligatory records without data: {tokens}")

    def _navigation_system(self):
        """System identifier of a navigation file: a system letter, or M for mixed RINEX 3 files"""
        letters = self.navigation.systems() or [s.letter for s in self.registry if s.selected]
        if self.version == RinexVersion.v304:
            return letters[0] if len(letters) == 1 else "M"

        v2_letters = [letter for letter in ("G", "R", "S") if letter in letters]
        if letters and not v2_letters:
            raise exceptions.SchemaError(f"Systems {letters} cannot be written in RINEX 2 navigation files")
        return v2_letters[0] if v2_letters else "G"

    def _event_lines(self):
        """Header lines of a special event epoch: records and comments set since the last print"""
        lines = list()
        for label in self.header.take_changes():
            if label in _NOT_IN_EVENTS or label not in labels.print_order(self.version, FileType.observation):
                continue
            lines.extend(rinex_header.record_lines(label, self.header.payloads(label), self.version))
        comments = [(text,) for text in self.header.take_new_comments()]
        lines.extend(rinex_header.record_lines(Label.COMM, comments, self.version))
        if not lines and self.epoch.flag in (EpochFlag.new_site, EpochFlag.header_info):
            raise exceptions.GrammarError(f"Event flag {int(self.epoch.flag)} requires header records")
        return lines

    def _output_satellites(self):
        """Satellite identifiers and observation fields of the current epoch, in output order"""
        printed = self.registry.printed_systems()
        if self.version == RinexVersion.v210:
            v2_codes = self.registry.v2_obs_types()

        satellites = list()
        for (system_index, prn), samples in self.observations.by_satellite():
            system = self.registry[system_index]
            if system not in printed:
                continue
            if self.version == RinexVersion.v210:
                positions = {c: v2_codes.index(systems.to_v2(c)) for c in system.output_codes()}
                num_fields = len(v2_codes)
            else:
                positions = {c: idx for idx, c in enumerate(system.output_codes())}
                num_fields = len(positions)

            fields = [None] * num_fields
            for sample in samples:
                code = system.obs_types[sample.obs_index].code
                if code not in positions:
                    continue
                value = self._value_to_file(system.letter, prn, code, sample.value)
                if value is None:
                    continue
                fields[positions[code]] = (value, sample.lol, sample.strength)
            if any(field is not None for field in fields):
                satellites.append((systems.satellite_id(system.letter, prn), fields))
        return satellites

    def _value_to_file(self, letter, prn, code, value):
        """Value as written to file, with scale factor and phase shift applied in RINEX 3. None if not printable"""
        if self.version == RinexVersion.v304:
            value = (value + self.header.phase_shift(letter, prn, code)) * self.header.scale_factor(letter, code)
        if not epochs.MIN_OBS_VALUE <= value <= epochs.MAX_OBS_VALUE:
            self.log.warn(f"Observation {code!r} of {systems.satellite_id(letter, prn)} out of range after scaling")
            return None
        return value

    @staticmethod
    def _write_lines(fid, lines):
        for line in lines:
            fid.write(line + "\n")

    #
    # READING
    #
    def read_rinex_header(self, fid):
        """Read the header of a RINEX file

        Header records are stored in the container. Lines that cannot be decoded are reported and skipped.

        Returns:
            Label: EOH when the header is read, VERSION if the file does not start with a valid RINEX VERSION / TYPE
                   record and LASTONE if the file ends before END OF HEADER.
        """
        self._reader = LineReader(fid)
        parser = HeaderParser()
        line = self._reader.read_line()
        if line is None:
            self.log.error("Empty RINEX file")
            return Label.LASTONE
        try:
            parser.parse(line)
        except exceptions.RinexException as err:
            self.log.error(f"Invalid first line of RINEX file: {err}")
            return Label.VERSION
        records = parser.take_records()
        if not records or records[0].label != Label.INFILEVER:
            self.log.error(f"RINEX file does not start with RINEX VERSION / TYPE: {line.rstrip()!r}")
            return Label.VERSION

        self._input = records[0].values
        self._in_version = parser.version
        self._in_file_type = parser.file_type
        self._in_sat_sys = parser.sat_sys
        self._in_obs_types = list() if parser.version == RinexVersion.v210 else dict()
        self.log.debug(f"Reading RINEX {self._input[0]:4.2f} file of type {parser.file_type!r}")

        while not parser.done:
            line = self._reader.read_line()
            if line is None:
                self.log.error("End of file before END OF HEADER")
                return Label.LASTONE
            try:
                parser.parse(line)
            except exceptions.RinexException as err:
                self.log.error(f"Header line {line.rstrip()!r} skipped: {err}")
            for record in parser.take_records():
                self._commit_header_record(record)

        self.header.take_changes()
        self.header.take_new_comments()
        self.log.info(f"Read RINEX {self._input[0]:4.2f} header")
        return Label.EOH

    def _line_reader(self, fid):
        """Reader of the lines of a file, kept between reads so that a peeked line is not lost"""
        if self._reader is None or self._reader.fid is not fid:
            self._reader = LineReader(fid)
        return self._reader

    def _commit_header_record(self, record):
        """Store a header record read from file, reporting records that cannot be stored"""
        label, values = record
        try:
            if label in (Label.VERSION, Label.RUNBY, Label.EOH):
                return
            elif label == Label.TOBS:
                self._commit_types_of_observ(*values)
            elif label == Label.SYS:
                letter, codes = values
                self.header.set(label, letter, codes, check_version=False)
                self._in_obs_types[letter] = list(codes)
            else:
                self.header.set(label, *values, check_version=False)
        except exceptions.RinexException as err:
            self.log.error(f"Header record {labels.id_to_label(label)!r} not stored: {err}")

    def _commit_types_of_observ(self, sat_sys, codes):
        """Store a RINEX 2 observation types record, for each system of the file"""
        self._in_obs_types[:] = codes
        known = [code for code in codes if systems.to_v3(code) is not None]
        if len(known) < len(codes):
            self.log.warn(f"Observation types {sorted(set(codes) - set(known))} cannot be translated and are skipped")
        if not known:
            raise exceptions.ShapeError("No observation types can be translated to RINEX 3")
        for letter in _V2_MIXED_SYSTEMS if sat_sys == "M" else (sat_sys,):
            self.header.set(Label.TOBS, letter, known, check_version=False)

    def read_obs_epoch(self, fid):
        """Read the next epoch of an observation file into the container

        Returns:
            ReadStatus: epoch_read, end_of_file, or epoch_error if the epoch cannot be decoded. Epochs with errors
                        are discarded, and the next read continues at the next epoch.
        """
        if self._in_version is None:
            self.log.error("The header must be read before the epochs of a file")
            return ReadStatus.epoch_error
        try:
            obs_epoch = parsers.read_epoch(
                self._in_version, FileType.observation, self._line_reader(fid), obs_types=self._in_obs_types
            )
            if obs_epoch is None:
                return ReadStatus.end_of_file
            for error in obs_epoch.errors:
                self.log.error(f"Epoch {obs_epoch.date}: {error}")
            if obs_epoch.errors:
                return ReadStatus.epoch_error
            records = self._parse_event_records(obs_epoch.header_lines)
            self._start_read_epoch(obs_epoch)
        except exceptions.RinexException as err:
            self.log.error(f"Observation epoch discarded: {err}")
            return ReadStatus.epoch_error

        for record in records:
            self._commit_header_record(record)
        for sample in obs_epoch.samples:
            self._commit_sample(sample)
        return ReadStatus.epoch_read

    def _parse_event_records(self, lines):
        """Header records of a special event epoch, all lines must be valid"""
        parser = HeaderParser(self._in_version, self._in_file_type, self._in_sat_sys)
        for line in lines:
            parser.parse(line)
        return parser.take_records() + parser.flush()

    def _start_read_epoch(self, obs_epoch):
        if obs_epoch.date is None:
            if not EpochFlag(obs_epoch.flag).has_header_records:
                raise exceptions.GrammarError(f"Missing date of epoch with flag {obs_epoch.flag}")
            week, tow = self.epoch.week, self.epoch.tow
        else:
            week, tow = gnss.datetime_to_gps(obs_epoch.date)
        self.epoch.set(week, tow, obs_epoch.bias, obs_epoch.flag)
        self.epoch.num_records = obs_epoch.num_records
        self.observations.clear()

    def _commit_sample(self, sample):
        code = sample.code
        if self._in_version == RinexVersion.v210:
            code = systems.to_v3(code)
            if code is None:
                return
        value = sample.value
        if self._in_version == RinexVersion.v304:
            value = value / self.header.scale_factor(sample.system, code)
            value -= self.header.phase_shift(sample.system, sample.prn, code)
        try:
            self._save_sample(sample.system, sample.prn, code, value, sample.lol, sample.strength)
        except exceptions.RinexException as err:
            self.log.warn(f"Observation {code!r} of {systems.satellite_id(sample.system, sample.prn)} skipped: {err}")

    def read_nav_epoch(self, fid):
        """Read the next record of a navigation file into the container

        Returns:
            ReadStatus: epoch_read, end_of_file, or epoch_error if the record cannot be decoded.
        """
        if self._in_version is None:
            self.log.error("The header must be read before the records of a file")
            return ReadStatus.epoch_error
        try:
            record = parsers.read_epoch(
                self._in_version, FileType.navigation, self._line_reader(fid), sat_sys=self._in_sat_sys
            )
            if record is None:
                return ReadStatus.end_of_file
            systems.check_satellite(record.system, record.prn)
            orbit = epochs.make_orbit(record.system, record.orbit)
            time_tag = gnss.nav_time_tag(record.system, record.date)
            self.navigation.add(epochs.NavigationRecord(time_tag, record.system, record.prn, orbit))
        except exceptions.RinexException as err:
            self.log.error(f"Navigation record discarded: {err}")
            return ReadStatus.epoch_error
        return ReadStatus.epoch_read

    #
    # FILE NAMES
    #
    def obs_file_name(self, prefix, country=None):
        """Name of an observation file with the data of the container

        The start time is the TIME OF FIRST OBS, or the current epoch if not set.

        Args:
            prefix (str):   Site designator.
            country (str):  Country code of RINEX 3 names, taken from the configuration if None.

        Returns:
            String with the file name, None if no name can be made.
        """
        first = self.header.get(Label.TOFO)
        start = gnss.gps_to_datetime(*first[:2]) if first else self.epoch.datetime
        try:
            if self.version == RinexVersion.v210:
                return naming.short_name(prefix, start, "o")
            printed = [s.letter for s in self.registry.printed_systems()]
            interval = self.header.get(Label.INT)
            return naming.long_name(
                prefix,
                start,
                (printed[0] if len(printed) == 1 else "M") + "O",
                country=config.setting("country", default="---") if country is None else country,
                source=config.setting("data_source", default="R"),
                period=self._obs_period(first, interval),
                interval=interval[0] if interval else None,
            )
        except exceptions.RinexException as err:
            self.log.error(f"No observation file name: {err}")
            return None

    def _obs_period(self, first, interval):
        last = self.header.get(Label.TOLO)
        if not first or not last:
            return None
        period = gnss.time_tag(*last[:2]) - gnss.time_tag(*first[:2])
        return period + (interval[0] if interval else 0)

    def nav_file_name(self, prefix, country=None):
        """Name of a navigation file with the data of the container

        The start time is the time of the first buffered record, or the current epoch if no records are buffered.

        Returns:
            String with the file name, None if no name can be made.
        """
        if len(self.navigation):
            record = self.navigation[0]
            start = gnss.nav_datetime(record.system, record.time_tag)
        else:
            start = self.epoch.datetime
        try:
            sat_sys = self._navigation_system()
            if self.version == RinexVersion.v210:
                return naming.short_name(prefix, start, gnss.system(sat_sys).v2_nav_type)
            return naming.long_name(
                prefix,
                start,
                sat_sys + "N",
                country=config.setting("country", default="---") if country is None else country,
                source=config.setting("data_source", default="R"),
            )
        except exceptions.RinexException as err:
            self.log.error(f"No navigation file name: {err}")
            return None
