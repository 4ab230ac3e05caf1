"""
Destinations for the pages returned by the Censys API
"""
import abc
import json
import logging
import sys

from .core import CensysOutputException


LOGGER = logging.getLogger(__name__)
"""The logger for this module"""


def dumps(value):
    """
    Serialize a JSON value on a single line.

    :param value: The JSON value
    :return: The compact JSON text
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class OutputSink(metaclass=abc.ABCMeta):
    """
    The abstract base class for page destinations.

    Subclasses must implement the 'write' method.
    """

    @abc.abstractmethod
    def write(self, value):
        """
        Write one JSON value followed by a newline.

        :param value: The JSON value
        :return: This method returns no values
        :raises CensysOutputException: If the value could not be written
        """
        raise NotImplementedError("OutputSink subclasses must implement the 'write' method")


class StandardOutputSink(OutputSink):
    """
    Prints each page to standard output
    """

    def __init__(self, stream=None):
        """
        Create a new standard output sink.

        :param stream: The stream to write to, or None for sys.stdout (looked up on every write)
        """
        self._stream = stream

    def write(self, value):
        stream = self._stream if self._stream is not None else sys.stdout
        try:
            stream.write(dumps(value) + "\n")
            stream.flush()
        except (OSError, UnicodeError) as err:
            raise CensysOutputException("Unable to write to standard output: %s" % err) from err


class FileSink(OutputSink):
    """
    Appends each page to a file.

    The file is created if it does not exist, and is opened and closed again for every page.
    """

    def __init__(self, path):
        """
        Create a new file sink.

        :param path: The path of the file
        """
        self._path = path

    @property
    def path(self):
        """
        Get the path of the file pages are appended to.

        :return: The file path
        """
        return self._path

    def write(self, value):
        LOGGER.debug("Appending page to %s", self.path)
        try:
            with open(self.path, "a", encoding="utf-8") as out_file:
                out_file.write(dumps(value) + "\n")
        except (OSError, UnicodeError) as err:
            raise CensysOutputException("Unable to write to %s: %s" % (self.path, err)) from err


def make_sink(path=None):
    """
    Create the sink for a run.

    :param path: The output file, or None for standard output
    :return: An OutputSink
    """
    if path is None:
        return StandardOutputSink()
    return FileSink(path)
