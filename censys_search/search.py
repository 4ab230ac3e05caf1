"""
Cursor based paging over the Censys Search API
"""
import logging


LOGGER = logging.getLogger(__name__)
"""The logger for this module"""

CURSOR_PARAMETER = "cursor"
"""The query parameter carrying the cursor of the page to retrieve"""


def get_cursor(response):
    """
    Get the cursor of the next page from a response.

    The cursor lives at result.links.next.  Anything other than a non-empty string there (a missing key at any level,
    null, an empty string, a number, ...) means there is no next page.

    :param response: The parsed response JSON
    :return: The cursor, or None if there is no next page
    """
    value = response
    for key in ("result", "links", "next"):
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def make_path_with_cursor(path, cursor):
    """
    Append a cursor to a request path.

    The cursor is passed through exactly as the API returned it.

    :param path: The base request path (as built for the first page)
    :param cursor: The cursor
    :return: The path for the page identified by the cursor
    """
    return "%s&%s=%s" % (path, CURSOR_PARAMETER, cursor)


class CensysSearch(object):
    """
    Retrieves every page of a Censys API resource.

    Pages are requested strictly one after the other: the next page is only requested once the previous one has been
    received and its cursor inspected.  Use it like this:

        with CensysApiAccessObject(credentials) as access:
            search = CensysSearch(access)
            for page in search.pages(make_path_from_query("services.port: 443")):
                ...

            # Or write every page to a sink:
            search.run(path, StandardOutputSink())
    """

    def __init__(self, access, paging=True):
        """
        Create a new search.

        :param access: The CensysApiAccessObject used to send requests
        :param paging: True to follow cursors, False to retrieve only the first page
        """
        self._access = access
        self._paging = paging

    @property
    def access(self):
        """
        Get the API access object used to send requests.

        :return: The CensysApiAccessObject
        """
        return self._access

    @property
    def paging(self):
        """
        Query whether cursors are followed.

        :return: True if every page is retrieved, False if only the first one is
        """
        return self._paging

    def pages(self, path):
        """
        A generator yielding every page of a resource.

        :param path: The request path of the first page
        :return: A generator of CensysResult objects
        :raises CensysRequestException: If a request fails (pages already yielded are unaffected)
        """
        number = 1
        LOGGER.debug("Retrieving page %d: %s", number, path)
        result = self.access.send(path)
        yield result
        if not self.paging:
            LOGGER.debug("Paging disabled")
            return
        previous = None
        cursor = get_cursor(result.raw)
        while cursor is not None:
            if cursor == previous:
                # Followed anyway, the API is trusted to eventually stop returning it
                LOGGER.warning("Censys returned the same cursor twice in a row: %s", cursor)
            number += 1
            next_path = make_path_with_cursor(path, cursor)
            LOGGER.debug("Retrieving page %d: %s", number, next_path)
            result = self.access.send(next_path)
            yield result
            previous = cursor
            cursor = get_cursor(result.raw)
        LOGGER.debug("No more pages after page %d", number)

    def run(self, path, sink):
        """
        Write every page of a resource to a sink.

        :param path: The request path of the first page
        :param sink: The OutputSink receiving each page's JSON
        :return: The number of pages written
        :raises CensysRequestException: If a request fails
        :raises CensysOutputException: If a page cannot be written
        """
        count = 0
        for result in self.pages(path):
            sink.write(result.raw)
            count += 1
        return count
