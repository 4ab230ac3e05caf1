"""
Construction of request paths for the Censys Search API

User supplied query values and IP addresses are percent-encoded; certificate fingerprints are used verbatim.  No
validation is performed here, malformed values are rejected by the API.
"""
import enum
import logging
from urllib.parse import quote


LOGGER = logging.getLogger(__name__)
"""The logger for this module"""


@enum.unique
class Resource(enum.Enum):
    """
    An enumeration of the API resources supported by this module.

    Each value is the path template for the resource.
    """

    HOSTS_SEARCH = "/hosts/search?q={0}"
    """Search hosts with a Censys Search Language query"""

    HOST = "/hosts/{0}"
    """View a single host by IP address"""

    CERTIFICATE_HOSTS = "/certificates/{0}/hosts"
    """Hosts presenting a certificate"""

    CERTIFICATE_COMMENTS = "/certificates/{0}/comments"
    """Comments on a certificate"""

    def path(self, value):
        """
        Fill in the path template.

        :param value: The (already encoded) value for the template
        :return: The request path
        """
        path = self.value.format(value)
        LOGGER.debug("Created %s path: %s", self.name, path)
        return path


def encode(value):
    """
    Percent-encode a value for use in a path or query string.

    Everything but the RFC 3986 unreserved characters (letters, digits, '-', '.', '_' and '~') is encoded, so a space
    becomes %20 rather than '+'.

    :param value: The original value
    :return: The encoded value
    """
    return quote(value, safe="")


def make_path_from_query(query):
    """
    Create a host search path for a Censys Search Language query.

    :param query: The query, which is percent-encoded
    :return: The path "/hosts/search?q=<query>"
    """
    return Resource.HOSTS_SEARCH.path(encode(query))


def make_path_from_ip(address):
    """
    Create the path viewing a single host.

    :param address: The IP address, which is percent-encoded
    :return: The path "/hosts/<address>"
    """
    return Resource.HOST.path(encode(address))


def make_path_from_dns_name(dns_name):
    """
    Create a host search path matching a DNS name.

    :param dns_name: The DNS name
    :return: The path searching for "dns.names: <dns_name>"
    """
    return make_path_from_query("dns.names: %s" % dns_name)


def make_path_from_asn(asn):
    """
    Create a host search path matching an autonomous system number.

    :param asn: The autonomous system number
    :return: The path searching for "autonomous_system.asn: <asn>"
    """
    return make_path_from_query("autonomous_system.asn: %s" % asn)


def make_hosts_path_from_cert_fingerprint(fingerprint):
    """
    Create the path listing hosts that present a certificate.

    :param fingerprint: The SHA256 fingerprint of the certificate, used verbatim
    :return: The path "/certificates/<fingerprint>/hosts"
    """
    return Resource.CERTIFICATE_HOSTS.path(fingerprint)


def make_comments_path_from_cert_fingerprint(fingerprint):
    """
    Create the path listing comments on a certificate.

    :param fingerprint: The SHA256 fingerprint of the certificate, used verbatim
    :return: The path "/certificates/<fingerprint>/comments"
    """
    return Resource.CERTIFICATE_COMMENTS.path(fingerprint)
