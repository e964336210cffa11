"""Write header records of RINEX 2.10 and 3.04 files

Description:
------------

Each header record is formatted by a function in `FORMATS`, taking all payloads of the label and the version of the
file, and returning the 60 character bodies of the lines. The label text is added in columns 61-80. Records are
written in the order of the label catalog, with each comment following the record it was stored after.

Example:
--------

    >>> lines = header_lines(store, RinexVersion.v304, FileType.observation, "G")
    >>> lines[0]
    '     3.04           OBSERVATION DATA    G: GPS              RINEX VERSION / TYPE'

"""

# Standard library imports
from datetime import datetime, timezone

# RinexData imports
from rinexdata.header import corrections
from rinexdata.header import labels
from rinexdata.header.labels import Label
from rinexdata.lib import config
from rinexdata.lib import gnss
from rinexdata.lib.enums import FileType, RinexVersion
from rinexdata.writers._rinex import chunks, format_d, format_e

V2_NAV_TYPE_TEXT = {"N": "N: GPS NAV DATA", "G": "G: GLONASS NAV DATA", "H": "H: GEO NAV MSG DATA"}
LEAP_TIME_SYSTEMS = {"G": "GPS", "C": "BDS"}


def header_lines(store, version, file_type, sat_sys):
    """All lines of a file header

    Args:
        store (HeaderStore):     Header records to write.
        version (RinexVersion):  Version of the file.
        file_type (FileType):    Observation or navigation file.
        sat_sys (str):           System identifier of the data in the file, M for mixed files.

    Returns:
        List of strings, one for each line, without line endings.
    """
    sequence = store.sequence(version, FileType(file_type))
    printed = tuple(lbl for lbl in sequence if lbl != Label.COMM)
    lines = list()
    for label in printed:
        if label == Label.VERSION:
            lines.extend(_lines(label, [_version_type(store, version, file_type, sat_sys)]))
        else:
            lines.extend(record_lines(label, store.payloads(label), version))
        lines.extend(_lines(Label.COMM, [(text,) for text in store.comments_after(label, printed)]))
    return lines


def record_lines(label, payloads, version):
    """Lines of one header record

    Args:
        label (Label):           Label of the record.
        payloads (list):         All payloads of the label.
        version (RinexVersion):  Version of the file.

    Returns:
        List of strings, one for each line, without line endings.
    """
    return _lines(label, payloads, version)


def _lines(label, payloads, version=RinexVersion.v304):
    token = labels.id_to_label(label)
    bodies = FORMATS.get(label, _format_single(""))(payloads, version)
    return ["{:60s}{}".format(body, token).rstrip() for body in bodies]


def _version_type(store, version, file_type, sat_sys):
    """Payload of the RINEX VERSION / TYPE record, with file type and system text"""
    if FileType(file_type) == FileType.observation:
        type_text = "OBSERVATION DATA"
        sys_text = _system_text(sat_sys)
    elif version == RinexVersion.v210:
        type_text = V2_NAV_TYPE_TEXT.get(gnss.SYSTEMS.get(sat_sys, gnss.SYSTEMS["G"]).v2_nav_type, "N: GPS NAV DATA")
        sys_text = ""
    else:
        type_text = "N: GNSS NAV DATA"
        sys_text = _system_text(sat_sys)
    return version.number, type_text, sys_text


def _system_text(sat_sys):
    if sat_sys == "M":
        return "M: MIXED"
    return "{}: {}".format(sat_sys, gnss.system(sat_sys).name.upper())


#
# FORMATS
#
def _format_single(fmt):
    """Formatter of records where each payload is one line in a fixed format"""

    def _format(payloads, _):
        return [fmt.format(*payload) for payload in payloads]

    return _format


def _format_version(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #      3.04           OBSERVATION DATA    M: MIXED            RINEX VERSION / TYPE
    return [
        "{:9.2f}{:11s}{:20s}{:20s}".format(number, "", type_text, sys_text)
        for number, type_text, sys_text in payloads
    ]


def _format_run_by(payloads, version):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    # rinexdata           NMA                 20160302 002000 UTC PGM / RUN BY / DATE
    run_date = datetime.now(timezone.utc).strftime(config.FMT_run_date[version])
    return [
        "{:20.20s}{:20.20s}{:20.20s}".format(program, run_by, date or run_date) for program, run_by, date in payloads
    ]


def _format_wavelength(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #      2     1     3    G14   G15   G16                       WAVELENGTH FACT L1/2
    bodies = list()
    for l1, l2, sats in payloads:
        if not sats:
            bodies.append("{:6d}{:6d}".format(l1, l2))
        for line_sats in chunks(sats, 7) if sats else []:
            bodies.append("{:6d}{:6d}{:6d}{}".format(l1, l2, len(line_sats), "".join(f"{s:>6s}" for s in line_sats)))
    return bodies


def _format_types_of_observ(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #      5    C1    L1    L2    P2    S1                        # / TYPES OF OBSERV
    codes = list()
    for _, sys_codes in payloads:
        codes.extend(code for code in sys_codes if code not in codes)
    lines = chunks(codes, 9)
    return [
        "{:6s}{}".format(f"{len(codes):6d}" if idx == 0 else "", "".join(f"{c:>6s}" for c in line))
        for idx, line in enumerate(lines)
    ]


def _format_sys_obs_types(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    # G   26 C1C C1P L1C L1P D1C D1P S1C S1P C2P C2W C2S C2L C2X  SYS / # / OBS TYPES
    #        L2P L2W L2S L2L L2X D2P D2W D2S D2L D2X S2P S2W S2S  SYS / # / OBS TYPES
    bodies = list()
    for letter, codes in payloads:
        for idx, line in enumerate(chunks(codes, 13)):
            head = "{:1s}  {:3d}".format(letter, len(codes)) if idx == 0 else ""
            bodies.append("{:6s}{}".format(head, "".join(f" {c:3s}" for c in line)))
    return bodies


def _format_obs_time(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #   2016     3     1     0     0    0.0000000     GPS         TIME OF FIRST OBS
    bodies = list()
    for week, tow, letter in payloads:
        date = gnss.gps_to_datetime(week, tow)
        bodies.append(
            "{:6d}{:6d}{:6d}{:6d}{:6d}{:13.7f}{:5s}{:3s}".format(
                date.year, date.month, date.day, date.hour, date.minute, gnss.split_seconds(date), "",
                gnss.time_system_name(letter),
            )
        )
    return bodies


def _format_scale_factor(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    # G  100  4 C1C L1C D1C S1C                                   SYS / SCALE FACTOR
    bodies = list()
    for letter, factor, codes in payloads:
        for idx, line in enumerate(chunks(codes, 12)):
            if idx == 0:
                head = "{:1s} {:4d}  {:2s}".format(letter, factor, f"{len(codes):2d}" if codes else "")
            else:
                head = ""
            bodies.append("{:10s}{}".format(head, "".join(f" {c:3s}" for c in line)))
    return bodies


def _format_phase_shift(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    # G L1C  0.00000  12 G01 G02 G03 G04 G05 G06 G07 G08 G09 G10  SYS / PHASE SHIFT
    #                    G11 G12                                  SYS / PHASE SHIFT
    bodies = list()
    for letter, code, correction, sats in payloads:
        for idx, line in enumerate(chunks(sats, 10)):
            if idx == 0:
                head = "{:1s} {:3s} {:8.5f}  {:2s}".format(letter, code, correction, f"{len(sats):2d}" if sats else "")
            else:
                head = ""
            bodies.append("{:18s}{}".format(head, "".join(f" {s:3s}" for s in line)))
    return bodies


def _format_glonass_slot(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #  22 R01  1 R02 -4 R03  5 R04  6 R05  1 R06 -4 R07  5 R08  6 GLONASS SLOT / FRQ #
    #     R09 -6 R10 -7 R11  0 R13 -2 R14 -7 R15  0 R17  4 R18 -3 GLONASS SLOT / FRQ #
    bodies = list()
    for idx, line in enumerate(chunks(list(payloads), 8)):
        head = "{:3d}".format(len(payloads)) if idx == 0 else ""
        bodies.append("{:3s} {}".format(head, "".join(f"R{slot:02d} {freq:2d} " for slot, freq in line)))
    return bodies


def _format_glonass_bias(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #  C1C  -10.000 C1P  -10.123 C2C  -10.432 C2P  -10.634        GLONASS COD/PHS/BIS
    return ["".join(f" {code:3s} {bias:8.3f}" for code, bias in line) for line in chunks(list(payloads), 4)]


def _format_leap_seconds(payloads, version):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #     18    18  1929     7GPS                                 LEAP SECONDS
    if version == RinexVersion.v210:
        return ["{:6d}".format(payload[0]) for payload in payloads]
    bodies = list()
    for leap_seconds, future, week, day, letter in payloads:
        if future or week or day:
            bodies.append(
                "{:6d}{:6d}{:6d}{:6d}{:3s}".format(leap_seconds, future, week, day, LEAP_TIME_SYSTEMS.get(letter, ""))
            )
        else:
            bodies.append("{:6d}".format(leap_seconds))
    return bodies


def _format_prn_obs(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #    G01  2875  2875  2875  2875  2875  2875  2875  2875  2875PRN / # OF OBS
    bodies = list()
    for letter, prn, counts in payloads:
        for idx, line in enumerate(chunks(counts, 9)):
            head = "   {}{:02d}".format(letter, prn) if idx == 0 else ""
            bodies.append("{:6s}{}".format(head, "".join(f"{c:6d}" for c in line)))
    return bodies


def _format_ion_v2(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #     0.1676D-07  0.2235D-07 -0.1192D-06 -0.1192D-06          ION ALPHA
    return ["  " + "".join(format_d(p, 12, 4) for p in params) for (params,) in payloads]


def _format_ionospheric_corr(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    # GPSA   7.4506E-09  1.4901E-08 -5.9605E-08 -1.1921E-07       IONOSPHERIC CORR
    bodies = list()
    for corr_type, params, mark, sv in payloads:
        bodies.append(
            "{:4s} {} {:1s} {:2s}".format(
                labels.id_to_label(corr_type),
                "".join(format_e(p, 12, 4) for p in params),
                chr(ord("A") + mark) if 0 <= mark <= 23 else "",
                f"{sv:2d}" if sv else "",
            )
        )
    return bodies


def _format_delta_utc(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #    -0.186264514923D-08-0.532907051820D-14   405504     1855 DELTA-UTC: A0,A1,T,W
    return [
        "   {}{}{:9d}{:9d}".format(format_d(a0, 19, 12), format_d(a1, 19, 12), ref_time, ref_week)
        for a0, a1, ref_time, ref_week in payloads
    ]


def _format_corr_to_system_time(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #   2016     3     1    0.000000000000D+00                    CORR TO SYSTEM TIME
    return [
        "{:6d}{:6d}{:6d}   {}".format(year, month, day, format_d(tau_c, 19, 12))
        for year, month, day, tau_c in payloads
    ]


def _format_geo_utc(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    #  0.133179128170D-06 0.107469588780D-12 552960 1855 EGNOS  2 D-UTC A0,A1,T,W,S,U
    return [
        "{}{}{:7d}{:5d} {:5s} {:2d}".format(
            format_d(a0, 19, 12), format_d(a1, 19, 12), ref_time, ref_week, source, utc_id
        )
        for a0, a1, ref_time, ref_week, source, utc_id in payloads
    ]


def _format_time_system_corr(payloads, _):
    # ----+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8
    # GPUT -5.5879354477E-09-1.598721155E-14 503808 1855 G10  2   TIME SYSTEM CORR
    bodies = list()
    for corr_type, (a0, a1, ref_time, ref_week), utc_id, source in payloads:
        bodies.append(
            "{:4s} {}{}{:7d}{:5d} {:5s} {:2s}".format(
                labels.id_to_label(corr_type),
                format_e(a0, 17, 10),
                format_e(a1, 16, 9),
                int(ref_time),
                int(ref_week),
                corrections.source_text(source, corr_type),
                f"{utc_id:2d}" if utc_id else "",
            )
        )
    return bodies


FORMATS = {
    Label.VERSION: _format_version,
    Label.RUNBY: _format_run_by,
    Label.COMM: _format_single("{:60.60s}"),
    Label.MRKNAME: _format_single("{:60.60s}"),
    Label.MRKNUMBER: _format_single("{:20.20s}"),
    Label.MRKTYPE: _format_single("{:20.20s}"),
    Label.AGENCY: _format_single("{:20.20s}{:40.40s}"),
    Label.RECEIVER: _format_single("{:20.20s}{:20.20s}{:20.20s}"),
    Label.ANTTYPE: _format_single("{:20.20s}{:20.20s}"),
    Label.APPXYZ: _format_single("{:14.4f}{:14.4f}{:14.4f}"),
    Label.ANTHEN: _format_single("{:14.4f}{:14.4f}{:14.4f}"),
    Label.ANTXYZ: _format_single("{:14.4f}{:14.4f}{:14.4f}"),
    Label.ANTPHC: _format_single("{:1s} {:3s}{:9.4f}{:14.4f}{:14.4f}"),
    Label.ANTBS: _format_single("{:14.4f}{:14.4f}{:14.4f}"),
    Label.ANTZDAZI: _format_single("{:14.4f}"),
    Label.ANTZDXYZ: _format_single("{:14.4f}{:14.4f}{:14.4f}"),
    Label.COFM: _format_single("{:14.4f}{:14.4f}{:14.4f}"),
    Label.WVLEN: _format_wavelength,
    Label.TOBS: _format_types_of_observ,
    Label.SYS: _format_sys_obs_types,
    Label.SIGU: _format_single("{:20.20s}"),
    Label.INT: _format_single("{:10.3f}"),
    Label.TOFO: _format_obs_time,
    Label.TOLO: _format_obs_time,
    Label.CLKOFFS: _format_single("{:6d}"),
    Label.DCBS: _format_single("{:1s} {:17.17s} {:40.40s}"),
    Label.PCVS: _format_single("{:1s} {:17.17s} {:40.40s}"),
    Label.SCALE: _format_scale_factor,
    Label.PHSH: _format_phase_shift,
    Label.GLSLT: _format_glonass_slot,
    Label.GLPHS: _format_glonass_bias,
    Label.LEAP: _format_leap_seconds,
    Label.SATS: _format_single("{:6d}"),
    Label.PRNOBS: _format_prn_obs,
    Label.IONA: _format_ion_v2,
    Label.IONB: _format_ion_v2,
    Label.IONC: _format_ionospheric_corr,
    Label.DUTC: _format_delta_utc,
    Label.CORRT: _format_corr_to_system_time,
    Label.GEOT: _format_geo_utc,
    Label.TIMC: _format_time_system_corr,
    Label.EOH: lambda payloads, _: [""],
}
