"""
Core functionality for the Censys search client
"""
import base64
import logging
import requests


LOGGER = logging.getLogger(__name__)
"""The logger for this module"""


class Credentials(object):
    """
    The API ID and secret used to authenticate with the Censys API.

    The Basic authentication token is computed once, when the credentials are created, and reused for every request.
    """

    def __init__(self, api_id, secret):
        """
        Create a new set of credentials.

        :param api_id: The Censys API ID
        :param secret: The Censys API secret
        """
        self._api_id = api_id
        self._secret = secret
        self._token = base64.b64encode(("%s:%s" % (api_id, secret)).encode("utf-8")).decode("ascii")

    @property
    def api_id(self):
        """
        Get the API ID.

        :return: The API ID
        """
        return self._api_id

    @property
    def secret(self):
        """
        Get the API secret.

        :return: The API secret
        """
        return self._secret

    @property
    def token(self):
        """
        Get the Basic authentication token (base64 of "<api_id>:<secret>").

        :return: The token
        """
        return self._token

    @property
    def authorization(self):
        """
        Get the value of the Authorization header.

        :return: The header value
        """
        return "Basic %s" % self._token

    def __repr__(self):
        # Never show the secret
        return "%s(%r, ***)" % (type(self).__name__, self.api_id)


class CensysResult(object):
    """
    A single page returned from a Censys API call
    """

    def __init__(self, code, raw):
        """
        Create a new result object.

        :param code: The HTTP status code returned from the API
        :param raw: The parsed response JSON returned by the API
        """
        self._code = code
        self._raw = raw

    @property
    def code(self):
        """
        Get the HTTP status code returned from the API.

        :return: The HTTP status code
        """
        return self._code

    @property
    def raw(self):
        """
        Get the parsed response JSON returned by the API.

        :return: The response JSON
        """
        return self._raw

    def __repr__(self):
        return "%s(%s, %s)" % (type(self).__name__, self.code, self.raw)

    def __str__(self):
        return CensysResult.__repr__(self)


class ErrorResult(CensysResult):
    """
    An error response from a Censys API call.

    The API answers errors with a JSON body such as {"code": 401, "status": "Unauthorized", "error": "..."}.  Error
    results are still pages: they are emitted like any other response, and since they carry no cursor they end paging.
    """

    def __init__(self, code, raw):
        """
        Create a new error response.

        :param code: The HTTP status code from the API
        :param raw: The parsed response JSON from the API
        """
        super(ErrorResult, self).__init__(code, raw)
        message = raw.get("error") if isinstance(raw, dict) else None
        self._message = message if message is not None else "HTTP %d" % code

    @property
    def message(self):
        """
        Get the error message for this result.

        :return: The error message
        """
        return self._message

    def __str__(self):
        # Example: "(401): You must authenticate with a valid API ID and secret."
        return "(%d): %s" % (self.code, self.message)


class CensysException(Exception):
    """
    The base class for all exceptions thrown by the Censys search client.
    """
    pass


class CensysConfigurationException(CensysException):
    """
    A required setting (such as an API credential) was not provided.
    """
    pass


class CensysRequestException(CensysException):
    """
    The base class for failures while performing a request.

    Callers that do not care why a request failed should catch this type.
    """

    def __init__(self, message, url):
        """
        Create a new exception.

        :param message: The error message
        :param url: The URL being requested
        """
        super(CensysRequestException, self).__init__(message)
        self._url = url

    @property
    def url(self):
        """
        Get the URL of the failed request.

        :return: The URL
        """
        return self._url


class CensysTransportException(CensysRequestException):
    """
    The request could not be completed (DNS, TLS, connection refused, timeout, ...).
    """
    pass


class CensysDecodeException(CensysRequestException):
    """
    The response body was not valid JSON.
    """
    pass


class CensysOutputException(CensysException):
    """
    A page could not be written to its output.
    """
    pass


class CensysApiAccessObject(object):
    """
    The object through which all requests to the Censys API are made.

    An access object owns the credentials and a single Requests session, both created once and reused for every
    request of a run.  Changing the base URL or timeout invalidates the session so that the next request rebuilds it.

    Access objects should be closed when no longer in use.  They support use in with statements but may also be closed
    via the 'close' method.
    """

    BASE_URL = "https://search.censys.io/api/v2"
    """The base URL for the Censys Search API"""

    DEFAULT_TIMEOUT = None
    """The default timeout for calls to the Censys REST API (None leaves it to the transport)"""

    def __init__(self, credentials, base_url=None):
        """
        Create a new API access object.

        :param credentials: The Credentials used to authenticate
        :param base_url: The base URL of the API, or None to use BASE_URL
        """
        self._credentials = credentials
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._timeout = self.DEFAULT_TIMEOUT
        self._session = None
        self.__session_is_invalid = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """
        Close this API access object.

        :return: This method returns no values
        """
        if self._session is not None:
            self._session.close()
            self._session = None

    @property
    def credentials(self):
        """
        Get the credentials used to access the Censys API.

        :return: The Credentials instance
        """
        return self._credentials

    @property
    def base_url(self):
        """
        Get the base URL that request paths are appended to.

        :return: The base URL
        """
        return self._base_url

    @base_url.setter
    def base_url(self, value):
        """
        Set the base URL that request paths are appended to.

        :param value: The base URL
        :return: This method returns no values
        """
        self._base_url = value.rstrip("/")
        self._invalidate_session()
        LOGGER.debug("Censys base URL is now %s", self._base_url)

    @property
    def timeout(self):
        """
        Get the current timeout used when accessing the Censys API.

        :return: The timeout in seconds, or None for the transport default
        """
        return self._timeout

    @timeout.setter
    def timeout(self, value):
        """
        Set the timeout to be used when accessing the Censys API.

        :param value: The timeout, in seconds (or None)
        :return: This method returns no values
        """
        self._timeout = value
        self._invalidate_session()
        LOGGER.debug("Censys timeout is now %s", self._timeout)

    def send(self, path):
        """
        Issue a GET request for a path and return the parsed page.

        :param path: The resource path (including any query string), appended verbatim to the base URL
        :return: A CensysResult, or an ErrorResult if the API answered with a non-2xx status
        :raises CensysTransportException: If the request could not be completed
        :raises CensysDecodeException: If the response body is not JSON
        """
        self._check_session()
        url = self._make_url(path)
        LOGGER.debug("Censys call: GET %s", url)
        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as err:
            raise CensysTransportException(str(err), url) from err
        code = response.status_code
        try:
            response_json = response.json()
        except ValueError as err:
            raise CensysDecodeException("Unable to decode response from %s (%d): %s" % (url, code, err), url) from err
        LOGGER.debug("Censys call responded %d", code)
        if 200 <= code < 300:
            return CensysResult(code, response_json)
        result = ErrorResult(code, response_json)
        LOGGER.warning("Censys error response %s", result)
        return result

    def _make_url(self, path):
        """
        Create the URL for a request path.

        :param path: The resource path
        :return: The URL for accessing the Censys API
        """
        return "%s%s" % (self.base_url, path)

    def _invalidate_session(self):
        """
        Mark the session as invalid.

        This should be used if something has changed that should cause the session to be re-initiated.

        :return: This method returns no values
        """
        self.__session_is_invalid = True

    def _check_session(self):
        """
        Ensure that the internal session is ready for use.

        This method will close an old session if it has been marked as invalid.  Then, if no session is available, it
        will create a new one, which is then available via the self._session member.

        :return: This method returns no values
        """
        if self.__session_is_invalid:
            self.close()
            self.__session_is_invalid = False
        if self._session is None:
            self._session = self._make_session()

    def _make_session(self):
        """
        Create a new Requests session object.

        :return: The new session object
        """
        session = requests.Session()
        session.headers.update({"Accept": "application/json",
                                "Authorization": self.credentials.authorization})
        return session
