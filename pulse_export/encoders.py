"""Document encoders for exercise recordings.

Each encoder is a pure function taking an ``ExerciseRecording`` and
returning the encoded document bytes. XML formats are built with lxml.
"""

import logging
from collections.abc import Callable

from lxml import etree

from .models import ExerciseRecording, ExportFormat
from .timestamps import format_epoch_seconds, format_iso8601, iter_epochs, iter_timestamps

logger = logging.getLogger(__name__)

GPX_NS = "http://www.topografix.com/GPX/1/1"
TCX_NS = "http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2"

GPX_CREATOR = "pulse-export"
GPX_TRACK_NAME = "Polar H10 Exercise"

FIT_HEADER = "timestamp,heart_rate"

Encoder = Callable[[ExerciseRecording], bytes]


def _serialize(root: etree._Element) -> bytes:
    return etree.tostring(root, xml_declaration=True, encoding="UTF-8", pretty_print=True)


def encode_gpx(recording: ExerciseRecording) -> bytes:
    """Encode a recording as a GPX 1.1 track.

    Heart rate only: every track point sits at ``lat="0.0" lon="0.0"`` and
    carries its bpm value in ``<extensions><hr>``.
    """

    def gpx(tag: str) -> str:
        return f"{{{GPX_NS}}}{tag}"

    root = etree.Element(gpx("gpx"), version="1.1", creator=GPX_CREATOR, nsmap={None: GPX_NS})
    metadata = etree.SubElement(root, gpx("metadata"))
    etree.SubElement(metadata, gpx("time")).text = format_iso8601(recording.start_time)

    trk = etree.SubElement(root, gpx("trk"))
    etree.SubElement(trk, gpx("name")).text = GPX_TRACK_NAME
    trkseg = etree.SubElement(trk, gpx("trkseg"))

    for timestamp, bpm in iter_timestamps(recording):
        trkpt = etree.SubElement(trkseg, gpx("trkpt"), lat="0.0", lon="0.0")
        etree.SubElement(trkpt, gpx("time")).text = format_iso8601(timestamp)
        extensions = etree.SubElement(trkpt, gpx("extensions"))
        etree.SubElement(extensions, gpx("hr")).text = str(bpm)

    logger.debug("Encoded %d GPX track points", len(recording.samples))
    return _serialize(root)


def encode_tcx(recording: ExerciseRecording) -> bytes:
    """Encode a recording as a Training Center XML activity with one lap."""

    def tcx(tag: str) -> str:
        return f"{{{TCX_NS}}}{tag}"

    start = format_iso8601(recording.start_time)

    root = etree.Element(tcx("TrainingCenterDatabase"), nsmap={None: TCX_NS})
    activities = etree.SubElement(root, tcx("Activities"))
    activity = etree.SubElement(activities, tcx("Activity"), Sport="Other")
    etree.SubElement(activity, tcx("Id")).text = start

    lap = etree.SubElement(activity, tcx("Lap"), StartTime=start)
    etree.SubElement(lap, tcx("TotalTimeSeconds")).text = str(recording.duration)
    # No distance or energy data from a chest strap
    etree.SubElement(lap, tcx("DistanceMeters")).text = "0.0"
    etree.SubElement(lap, tcx("Calories")).text = "0"
    etree.SubElement(lap, tcx("Intensity")).text = "Active"
    etree.SubElement(lap, tcx("TriggerMethod")).text = "Manual"
    track = etree.SubElement(lap, tcx("Track"))

    for timestamp, bpm in iter_timestamps(recording):
        point = etree.SubElement(track, tcx("Trackpoint"))
        etree.SubElement(point, tcx("Time")).text = format_iso8601(timestamp)
        hr = etree.SubElement(point, tcx("HeartRateBpm"))
        etree.SubElement(hr, tcx("Value")).text = str(bpm)

    logger.debug("Encoded %d TCX trackpoints", len(recording.samples))
    return _serialize(root)


def encode_fit(recording: ExerciseRecording) -> bytes:
    """Encode a recording as the tabular FIT placeholder.

    This is CSV text, not binary FIT: a ``timestamp,heart_rate`` header then
    one ``<epoch seconds>,<bpm>`` row per sample. Epoch seconds are
    ``start_epoch + index * interval`` in float, without microsecond rounding.
    """
    lines = [FIT_HEADER]
    lines.extend(f"{format_epoch_seconds(epoch)},{bpm}" for epoch, bpm in iter_epochs(recording))

    logger.debug("Encoded %d FIT placeholder rows", len(recording.samples))
    return ("\n".join(lines) + "\n").encode("utf-8")


ENCODERS: dict[ExportFormat, Encoder] = {
    ExportFormat.GPX: encode_gpx,
    ExportFormat.TCX: encode_tcx,
    ExportFormat.FIT: encode_fit,
}
