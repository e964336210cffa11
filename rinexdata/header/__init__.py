"""Framework for RINEX header records

Description:
------------

Header records are identified by :class:`~rinexdata.header.labels.Label`. The catalog in
:mod:`~rinexdata.header.labels` describes each label: its text in the files, the versions it is defined in, whether
it is obligatory, and the shape of its payload. Payloads are validated by :mod:`~rinexdata.header.payloads` and
stored in a :class:`~rinexdata.header.store.HeaderStore`.

"""
