"""Registry of GNSS systems and their observables

Description:
------------

The registry keeps, for the RINEX version a container writes, the satellite systems in use. Each system has an ordered
catalog of observables with selection flags, the order in which observables were declared in the header, and a list
of selected satellites (empty means all satellites are accepted).

Observable codes are stored in their RINEX 3 form. RINEX 2 codes are translated with a fixed table pairing the codes
position by position:

=======  ======  =======  ======  =======  ======
 V3       V2      V3       V2      V3       V2
=======  ======  =======  ======  =======  ======
 C1C      C1      S1C      S1      L2P      L2
 L1C      L1      C1P      P1      D2P      D2
 D1C      D1      C2P      P2      S2P      S2
=======  ======  =======  ======  =======  ======

"""

# Standard library imports
import numbers

# RinexData imports
from rinexdata.lib import exceptions
from rinexdata.lib import gnss
from rinexdata.lib.enums import RinexVersion

V3_OBS_TYPES = ("C1C", "L1C", "D1C", "S1C", "C1P", "C2P", "L2P", "D2P", "S2P")
V2_OBS_TYPES = ("C1", "L1", "D1", "S1", "P1", "P2", "L2", "D2", "S2")

_TO_V2 = dict(zip(V3_OBS_TYPES, V2_OBS_TYPES))
_TO_V3 = dict(zip(V2_OBS_TYPES, V3_OBS_TYPES))

MAX_PRN = 99


def to_v2(code):
    """RINEX 2 code of a RINEX 3 observable, None if it has no RINEX 2 equivalent"""
    return _TO_V2.get(code)


def to_v3(code):
    """RINEX 3 code of a RINEX 2 observable, None if it has no RINEX 3 equivalent"""
    return _TO_V3.get(code)


def satellite_id(letter, prn):
    return f"{letter}{prn:02d}"


def parse_satellite(text):
    """System letter and PRN of a satellite identifier like 'G05' or 'G 5'

    In RINEX 2 files a blank system identifier means GPS.
    """
    letter = text[0] if text[0] != " " else "G"
    try:
        prn = int(text[1:])
    except ValueError:
        raise exceptions.GrammarError(f"Invalid satellite identifier {text!r}") from None
    check_satellite(letter, prn)
    return letter, prn


def check_satellite(letter, prn):
    if not isinstance(letter, str):
        raise exceptions.ShapeError(f"System identifier {letter!r} is not a string")
    if isinstance(prn, bool) or not isinstance(prn, numbers.Integral):
        raise exceptions.ShapeError(f"Satellite number {prn!r} is not an integer")
    if not gnss.is_system(letter):
        raise exceptions.RangeError(f"Unknown satellite system {letter!r}")
    if not 1 <= prn <= MAX_PRN:
        raise exceptions.RangeError(f"Satellite number {prn} of system {letter!r} is not in [1, {MAX_PRN}]")


def check_codes(letter, codes):
    """Observable codes declared for a system must be unique RINEX 3 codes"""
    if isinstance(codes, str) or not all(isinstance(code, str) and len(code) == 3 for code in codes):
        raise exceptions.ShapeError(f"Observable types {codes!r} of system {letter!r} are not RINEX 3 codes")
    if len(set(codes)) != len(codes):
        raise exceptions.ShapeError(f"Observable types of system {letter!r} are not unique: {codes}")


class ObservableMeta:
    """An observable of a system: its code and flags"""

    def __init__(self, code, selected=False):
        self.code = code
        self.selected = selected
        self.printable = False

    def update_printable(self, version):
        self.printable = self.selected and (version == RinexVersion.v304 or to_v2(self.code) is not None)

    def __repr__(self):
        return f"{type(self).__name__}({self.code!r}, selected={self.selected}, printable={self.printable})"


class GNSSSystem:
    """A satellite system with its observable catalog and satellite selection"""

    def __init__(self, letter, obs_types):
        self.letter = letter
        self.selected = False
        self.obs_types = obs_types
        self.declared = list()
        self.sats = list()

    @classmethod
    def from_template(cls, letter, codes=V3_OBS_TYPES):
        """Create a system with a copy of the default observable catalog, nothing selected"""
        gnss.system(letter)
        return cls(letter, [ObservableMeta(code) for code in codes])

    def index(self, code):
        """Index of an observable in the catalog

        Raises:
            RangeError: If the observable is not known to the system.
        """
        for idx, obs in enumerate(self.obs_types):
            if obs.code == code:
                return idx
        raise exceptions.RangeError(f"Observable {code!r} is not defined for system {self.letter!r}")

    def add(self, code):
        """Index of an observable, adding it to the catalog if it is not known"""
        try:
            return self.index(code)
        except exceptions.RangeError:
            self.obs_types.append(ObservableMeta(code))
            return len(self.obs_types) - 1

    def declare(self, codes):
        """Declare the observables of the system, as in a SYS / # / OBS TYPES record

        The declared codes become the selected observables, in the declared order, all others are unselected.
        """
        self.select(codes)
        self.declared = list(codes)
        self.selected = True

    def select(self, codes):
        """Overlay a selection on the catalog, adding codes not known to the catalog"""
        for code in codes:
            self.add(code)
        for obs in self.obs_types:
            obs.selected = obs.code in codes

    def output_codes(self, printable_only=True):
        """Selected observables in output order: declared order first, then catalog order"""
        wanted = [obs.code for obs in self.obs_types if obs.printable or (not printable_only and obs.selected)]
        ordered = [code for code in self.declared if code in wanted]
        return ordered + [code for code in wanted if code not in ordered]

    def accepts(self, prn):
        """Whether a satellite passes the satellite selection"""
        return not self.sats or prn in self.sats

    def __repr__(self):
        return f"{type(self).__name__}({self.letter!r}, selected={self.selected}, obs_types={self.obs_types})"


class SystemRegistry:
    """The satellite systems used by a container, in the order they were first referenced

    The position of a system in the registry is the system index used in observation samples.
    """

    def __init__(self, version):
        self.version = version
        self._systems = list()

    def clear_selection(self):
        """Unselect all systems and observables, keeping the systems and their catalogs"""
        for system in self._systems:
            system.selected = False
            system.declared = list()
            system.sats = list()
            for obs in system.obs_types:
                obs.selected = obs.printable = False

    def __iter__(self):
        return iter(self._systems)

    def __len__(self):
        return len(self._systems)

    def __getitem__(self, idx):
        return self._systems[idx]

    def index(self, letter):
        """Index of a system, -1 if the system is not registered"""
        for idx, system in enumerate(self._systems):
            if system.letter == letter:
                return idx
        return -1

    def get(self, letter, create=False):
        """A registered system

        Args:
            letter (str):   System identifier.
            create (bool):  Register the system with the default observables if it is not known.

        Returns:
            GNSSSystem: The system.
        """
        idx = self.index(letter)
        if idx >= 0:
            return self._systems[idx]
        if not create:
            raise exceptions.RangeError(f"Satellite system {letter!r} is not registered")
        system = GNSSSystem.from_template(letter)
        self._systems.append(system)
        return system

    def declare(self, letter, codes):
        """Set the observables of a system from a header record with RINEX 3 codes"""
        gnss.system(letter)
        check_codes(letter, codes)
        system = self.get(letter, create=True)
        system.declare(codes)
        self.update_printable()
        return system

    def declare_v2(self, letter, codes):
        """Set the observables of a system from a header record with RINEX 2 codes

        Raises:
            ShapeError: If any of the codes cannot be translated to RINEX 3.
        """
        v3_codes = [to_v3(code) for code in codes]
        if None in v3_codes:
            untranslated = [c for c, v3 in zip(codes, v3_codes) if v3 is None]
            raise exceptions.ShapeError(f"Observable types {untranslated} cannot be translated to RINEX 3")
        return self.declare(letter, v3_codes)

    def set_filter(self, sel_sat, sel_obs):
        """Set selection flags from satellite and observable selectors

        Satellite selectors are a system letter (the whole constellation) or a satellite identifier like 'G05'.
        Observable selectors are RINEX 3 codes ('C1C', for all systems), codes prefixed with a system letter ('GC1C')
        or RINEX 2 codes ('C1'). The selectors are parsed before anything is changed, so that invalid selectors leave
        the registry untouched. Empty selector lists leave the corresponding selection unchanged.
        """
        sat_selection = dict()
        for selector in _selectors(sel_sat, "Satellite"):
            if len(selector) == 1:
                gnss.system(selector)
                sat_selection.setdefault(selector, list())
            elif len(selector) in (2, 3):
                letter, prn = parse_satellite(selector)
                sat_selection.setdefault(letter, list()).append(prn)
            else:
                raise exceptions.RangeError(f"Invalid satellite selector {selector!r}")

        all_codes, sys_codes = list(), dict()
        for selector in _selectors(sel_obs, "Observable"):
            if len(selector) == 2:
                code = to_v3(selector)
                if code is None:
                    raise exceptions.RangeError(f"Observable selector {selector!r} cannot be translated to RINEX 3")
                all_codes.append(code)
            elif len(selector) == 3:
                all_codes.append(selector)
            elif len(selector) == 4:
                gnss.system(selector[0])
                sys_codes.setdefault(selector[0], list()).append(selector[1:])
            else:
                raise exceptions.RangeError(f"Invalid observable selector {selector!r}")

        if sat_selection:
            for letter in sat_selection:
                self.get(letter, create=True)
            for system in self._systems:
                system.selected = system.letter in sat_selection
                system.sats = sorted(set(sat_selection.get(system.letter, [])))

        for letter in sys_codes:
            self.get(letter, create=True).selected = True
        if all_codes or sys_codes:
            for system in self._systems:
                codes = all_codes + sys_codes.get(system.letter, [])
                if codes:
                    system.select(codes)
        self.update_printable()

    def update_printable(self):
        for system in self._systems:
            for obs in system.obs_types:
                obs.update_printable(self.version)

    def printed_systems(self):
        """Selected systems with observables to print"""
        return [s for s in self._systems if s.selected and s.output_codes()]

    def v2_obs_types(self):
        """Common list of RINEX 2 observable types of all printed systems"""
        codes = list()
        for system in self.printed_systems():
            for code in system.output_codes():
                if to_v2(code) not in codes:
                    codes.append(to_v2(code))
        return codes


def _selectors(selectors, kind):
    """Stripped selectors from a list of strings"""
    if isinstance(selectors, str):
        raise exceptions.ShapeError(f"{kind} selectors must be given as a list, not {selectors!r}")
    try:
        selectors = list(selectors)
    except TypeError:
        raise exceptions.ShapeError(f"{kind} selectors {selectors!r} are not a list") from None
    if not all(isinstance(s, str) for s in selectors):
        raise exceptions.ShapeError(f"{kind} selectors {selectors!r} are not strings")
    return [s.strip() for s in selectors]
