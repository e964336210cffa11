"""Storage of the header records of one RINEX file

Description:
------------

The header store keeps, per label of the catalog, the validated payloads and whether the label has data. Most labels
hold a single payload, labels in `ACCUMULATING` hold a list of payloads. Some labels are backed by other structures:

- `# / TYPES OF OBSERV` and `SYS / # / OBS TYPES` by the system registry,
- ionospheric and time system correction records by a list of corrections,
- COMMENT records by a list of comments, each placed after the record set before it.

Example:
--------

    >>> store = HeaderStore(RinexVersion.v304, SystemRegistry(RinexVersion.v304), "rinexdata", "NMA")
    >>> store.set(Label.MRKNAME, "STAS")
    >>> store.get(Label.MRKNAME)
    ('STAS',)

"""

# RinexData imports
from rinexdata.header import corrections
from rinexdata.header import labels
from rinexdata.header import payloads
from rinexdata.header.labels import Label
from rinexdata.lib import exceptions
from rinexdata import systems

ACCUMULATING = frozenset(
    (
        Label.WVLEN,
        Label.DCBS,
        Label.PCVS,
        Label.SCALE,
        Label.PHSH,
        Label.GLSLT,
        Label.GLPHS,
        Label.LEAP,
        Label.PRNOBS,
    )
)
OBS_TYPE_LABELS = frozenset((Label.TOBS, Label.SYS))
CORRECTION_LABELS = frozenset(labels.V2_CORRECTIONS) | {Label.IONC, Label.TIMC}


class HeaderStore:
    """Header records of one file

    Args:
        version (RinexVersion):     Version of the files written from the store.
        registry (SystemRegistry):  Systems backing the observation type records.
        program (str):              Program creating the files.
        run_by (str):               Agency creating the files.
    """

    def __init__(self, version, registry, program, run_by):
        self.version = version
        self.registry = registry
        self.program = program
        self.run_by = run_by
        self._data = dict()
        self._comments = list()
        self.corrections = list()
        self._last_set = Label.RUNBY
        self._changed = set()
        self._comment_mark = 0
        self.clear()

    def clear(self):
        """Remove all header data except the identity records fixed at construction"""
        self._data.clear()
        self._comments.clear()
        self.corrections.clear()
        self.registry.clear_selection()
        self._data[Label.VERSION] = [(self.version.number, " ", " ")]
        self._data[Label.RUNBY] = [(self.program, self.run_by, "")]
        self._last_set = Label.RUNBY
        self._changed.clear()
        self._comment_mark = 0

    def set(self, label, *values, check_version=True):
        """Store the payload of a header record

        Args:
            label (Label):        Label of the record.
            values:               Payload, as declared by the shape of the label.
            check_version (bool): Reject labels not defined in the version of the store.
        """
        label_def = labels.definition(label)
        if label_def.shape is None or not Label.VERSION <= label <= Label.EOH:
            raise exceptions.SchemaError(f"Label {label_def.token!r} does not hold header data")
        if check_version and not labels.is_applicable(label, self.version):
            raise exceptions.SchemaError(
                f"Label {label_def.token!r} is not defined in RINEX {self.version.number:4.2f}"
            )
        payload = payloads.validate(label_def.shape, values)

        if label == Label.VERSION:
            if check_version and payload[0] != self.version.number:
                raise exceptions.RangeError(f"Version {payload[0]} does not match RINEX {self.version.number:4.2f}")
            self._data[label] = [payload]
        elif label == Label.COMM:
            self._comments.append((self._last_set, payload[0]))
        elif label in OBS_TYPE_LABELS:
            self._set_obs_types(label, payload)
        elif label in CORRECTION_LABELS:
            self._set_correction(label, payload)
        elif label in ACCUMULATING:
            self._data.setdefault(label, list()).append(payload)
        else:
            self._data[label] = [payload]

        if label != Label.COMM:
            self._last_set = label
        self._changed.add(label)

    def _set_obs_types(self, label, payload):
        letter, codes = payload
        if not codes:
            raise exceptions.ShapeError(f"No observable types given for system {letter!r}")
        if label == Label.TOBS:
            self.registry.declare_v2(letter, codes)
        else:
            self.registry.declare(letter, codes)

    def _set_correction(self, label, payload):
        if label in labels.V2_CORRECTIONS:
            correction = corrections.from_v2(label, payload)
        else:
            correction = corrections.from_v3(*payload)
            if (label == Label.IONC) != correction.is_iono:
                raise exceptions.ShapeError(f"Correction type {correction.type.name} does not belong to {label.name}")
        self.corrections[:] = [c for c in self.corrections if c.type != correction.type] + [correction]

    def get(self, label, index=0):
        """Payload of a header record

        Args:
            label (Label):  Label of the record.
            index (int):    Index of the payload, for labels holding several payloads.

        Returns:
            Tuple with the payload, None if the label has no data at the given index.
        """
        stored = self.payloads(label)
        if not 0 <= index < len(stored):
            return None
        return tuple(list(v) if isinstance(v, list) else v for v in stored[index])

    def payloads(self, label):
        """All payloads of a header record, in the shape of the label"""
        label = Label(label)
        if label == Label.COMM:
            return [(text,) for _, text in self._comments]
        if label == Label.TOBS:
            return [
                (s.letter, [systems.to_v2(c) for c in s.output_codes() if systems.to_v2(c)])
                for s in self.registry.printed_systems()
                if any(systems.to_v2(c) for c in s.output_codes())
            ]
        if label == Label.SYS:
            return [
                (s.letter, s.output_codes(printable_only=False))
                for s in self.registry
                if s.selected and s.output_codes(printable_only=False)
            ]
        if label in labels.V2_CORRECTIONS:
            corr_type = labels.V2_CORRECTIONS[label]
            return [corrections.to_v2(label, c) for c in self.corrections if c.type == corr_type]
        if label in (Label.IONC, Label.TIMC):
            return [corrections.to_v3(c) for c in self.corrections if c.is_iono == (label == Label.IONC)]
        return list(self._data.get(label, []))

    def has_data(self, label):
        return label == Label.EOH or bool(self.payloads(label))

    def comments_after(self, label, printed):
        """Comments to print after a record

        A comment is printed after the record that was set before it, or the closest printed record before that one.

        Args:
            label (Label):    Record just printed.
            printed (tuple):  All records printed, in print order.
        """
        texts = list()
        for anchor, text in self._comments:
            placed = max((lbl for lbl in printed if lbl <= anchor), default=Label.VERSION)
            if placed == label:
                texts.append(text)
        return texts

    def sequence(self, version=None, file_type=None):
        """Labels with data in print order, COMMENT repeated once per comment

        Args:
            version (RinexVersion):  Version to print, the version of the store if None.
            file_type (FileType):    Only labels applicable to this file type.
        """
        version = self.version if version is None else version
        printed = tuple(
            lbl for lbl in labels.print_order(version, file_type) if lbl != Label.COMM and self.has_data(lbl)
        )
        result = list()
        for lbl in printed:
            result.append(lbl)
            result.extend(Label.COMM for _ in self.comments_after(lbl, printed))
        return result

    def missing(self, file_type):
        """Obligatory records without data for the version of the store and the given file type"""
        return [lbl for lbl in labels.obligatory(self.version, file_type) if not self.has_data(lbl)]

    def cursor(self):
        return LabelCursor(self)

    def take_changes(self):
        """Labels set since the last call, in print order. Comments are given by take_new_comments"""
        changed = [lbl for lbl in labels.HEADER_LABELS if lbl in self._changed and lbl != Label.COMM]
        self._changed.clear()
        return changed

    def take_new_comments(self):
        """Comments stored since the last call"""
        texts = [text for _, text in self._comments[self._comment_mark :]]
        self._comment_mark = len(self._comments)
        return texts

    def scale_factor(self, letter, code):
        """Scale factor of an observable from the SYS / SCALE FACTOR records, 1 if not scaled"""
        for sys_letter, factor, codes in self._data.get(Label.SCALE, []):
            if sys_letter == letter and (not codes or code in codes):
                return factor
        return 1

    def phase_shift(self, letter, prn, code):
        """Phase shift correction of an observable from the SYS / PHASE SHIFT records, 0 if not corrected"""
        if not code.startswith("L"):
            return 0.0
        sat = systems.satellite_id(letter, prn)
        for sys_letter, shift_code, correction, sats in self._data.get(Label.PHSH, []):
            if sys_letter == letter and shift_code == code and (not sats or sat in sats):
                return correction
        return 0.0


class LabelCursor:
    """Restartable iterator over the labels with data, in print order

    `first()` restarts the traversal and `next()` advances it. Both return `Label.LASTONE` when the traversal is
    exhausted. The cursor is also a Python iterator, stopping at the end instead of returning the sentinel.
    """

    def __init__(self, store):
        self._store = store
        self._labels = list()
        self._pos = 0

    def first(self):
        self._labels = self._store.sequence()
        self._pos = 0
        return self.next()

    def next(self):
        if self._pos >= len(self._labels):
            return Label.LASTONE
        label = self._labels[self._pos]
        self._pos += 1
        return label

    def __iter__(self):
        self._labels = self._store.sequence()
        self._pos = 0
        return self

    def __next__(self):
        label = self.next()
        if label == Label.LASTONE:
            raise StopIteration
        return label
