"""Removal of buffered data not passing the current selection

Description:
------------

The selection is set on the system registry (see :meth:`~rinexdata.systems.SystemRegistry.set_filter`), optionally
together with a time window. The functions below remove, in place, every buffered item not passing the selection.
Applying a filter twice with unchanged selection gives the same result as applying it once.

A registry where no system is selected applies no system selection, and a system where no observable is selected
applies no observable selection. Data read from files are then kept until a selection is set.

"""


class TimeWindow:
    """Closed interval of time tags, open ended where a limit is None"""

    def __init__(self, start=None, end=None):
        self.start = start
        self.end = end

    def __contains__(self, time_tag):
        return (self.start is None or time_tag >= self.start) and (self.end is None or time_tag <= self.end)

    def __repr__(self):
        return f"{type(self).__name__}(start={self.start}, end={self.end})"


def filter_observations(buffer, registry, epoch_tag, window, remove_not_printable=False):
    """Remove observation samples not passing the selection

    Args:
        buffer (ObservationBuffer):  Samples of the current epoch.
        registry (SystemRegistry):   Systems with selection flags.
        epoch_tag (float):           Time tag of the current epoch.
        window (TimeWindow):         Accepted epochs.
        remove_not_printable (bool): Also remove selected observables that cannot be printed in the active version.

    Returns:
        Int: Number of removed samples.
    """
    if epoch_tag not in window:
        num_removed = len(buffer)
        buffer.clear()
        return num_removed

    any_system = any(s.selected for s in registry)

    def rejected(sample):
        system = registry[sample.system_index]
        obs = system.obs_types[sample.obs_index]
        any_obs = any(o.selected for o in system.obs_types)
        return (
            (any_system and not system.selected)
            or not system.accepts(sample.prn)
            or (any_obs and not obs.selected)
            or (remove_not_printable and obs.selected and not obs.printable)
        )

    return buffer.remove_if(rejected)


def filter_navigation(buffer, registry, window):
    """Remove navigation records not passing the selection

    Records of systems that are not registered are removed when a system selection is set.

    Returns:
        Int: Number of removed records.
    """
    any_system = any(s.selected for s in registry)

    def rejected(record):
        if record.time_tag not in window:
            return True
        idx = registry.index(record.system)
        if idx < 0:
            return any_system
        system = registry[idx]
        return (any_system and not system.selected) or not system.accepts(record.prn)

    return buffer.remove_if(rejected)
