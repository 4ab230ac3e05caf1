"""
Command line interface for the Censys Search API

Usage examples:
    censys-search query "services.port: 443"
    censys-search --no_paging ip 8.8.8.8
    censys-search -o hosts.json cert hosts <sha256 fingerprint>
"""
import argparse
import logging
import os
import sys

from . import __version__
from . import paths
from .core import CensysApiAccessObject, CensysConfigurationException, CensysException, Credentials
from .fields import describe_fields
from .output import make_sink
from .search import CensysSearch


LOGGER = logging.getLogger(__name__)
"""The logger for this module"""

API_ID_VARIABLE = "CENSYS_API_ID"
"""The environment variable holding the API ID when --api_id is not given"""

SECRET_VARIABLE = "CENSYS_SECRET"
"""The environment variable holding the API secret when --secret is not given"""

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_parser():
    """
    Create the argument parser.

    Each command stores a 'make_path' function turning its argument into a request path (or None for commands that do
    not call the API).

    :return: The argument parser
    """
    parser = argparse.ArgumentParser(prog="censys-search", description="Censys Search API utility")
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    parser.add_argument("-i", "--api_id", metavar="ID",
                        help="API ID (if not specified %s must be set)" % API_ID_VARIABLE)
    parser.add_argument("-s", "--secret", metavar="SECRET",
                        help="API secret (if not specified %s must be set)" % SECRET_VARIABLE)
    parser.add_argument("-o", "--output", metavar="FILE", help="Output file name")
    parser.add_argument("-n", "--no_paging", action="store_true", help="Disable paging of results")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more details (repeat for debug)")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    query = commands.add_parser("query", help="Search based on custom query")
    query.add_argument("value", metavar="query", help="Query using the Censys Search query language")
    query.set_defaults(make_path=paths.make_path_from_query)

    ip = commands.add_parser("ip", help="Search based on IP address")
    ip.add_argument("value", metavar="address", help="IP address")
    ip.set_defaults(make_path=paths.make_path_from_ip)

    dns = commands.add_parser("dns", help="Search based on DNS name")
    dns.add_argument("value", metavar="dns_name", help="DNS name")
    dns.set_defaults(make_path=paths.make_path_from_dns_name)

    asn = commands.add_parser("asn", help="Search based on autonomous system number")
    asn.add_argument("value", metavar="asn", help="Autonomous system number")
    asn.set_defaults(make_path=paths.make_path_from_asn)

    cert = commands.add_parser("cert", help="Search based on TLS certificate")
    cert_commands = cert.add_subparsers(dest="cert_command", metavar="COMMAND")
    cert_commands.required = True
    hosts = cert_commands.add_parser("hosts", help="Search for hosts related to the certificate")
    hosts.add_argument("value", metavar="fingerprint", help="SHA256 fingerprint of the certificate")
    hosts.set_defaults(make_path=paths.make_hosts_path_from_cert_fingerprint)
    comments = cert_commands.add_parser("comments", help="Search for comments related to the certificate")
    comments.add_argument("value", metavar="fingerprint", help="SHA256 fingerprint of the certificate")
    comments.set_defaults(make_path=paths.make_comments_path_from_cert_fingerprint)

    fields = commands.add_parser("fields", help="Show all available Censys Search query language fields")
    fields.set_defaults(make_path=None)

    return parser


def get_setting(value, name):
    """
    Get a setting from its command line value, falling back to the environment.

    :param value: The value given on the command line (or None)
    :param name: The environment variable to fall back to
    :return: The setting
    :raises CensysConfigurationException: If the setting was given in neither place
    """
    if value is not None:
        return value
    value = os.environ.get(name)
    if value is None:
        raise CensysConfigurationException("%s is not defined" % name)
    return value


def configure_logging(verbosity):
    """
    Send log records to standard error.

    :param verbosity: 0 for warnings, 1 for info, 2 or more for debug
    :return: This method returns no values
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    # basicConfig leaves the level alone when the root logger already has handlers
    logging.getLogger().setLevel(level)


def run(args):
    """
    Execute the command described by parsed arguments.

    :param args: The parsed arguments
    :return: This method returns no values
    :raises CensysException: If the command fails
    """
    if args.make_path is None:
        print(describe_fields())
        return
    credentials = Credentials(get_setting(args.api_id, API_ID_VARIABLE), get_setting(args.secret, SECRET_VARIABLE))
    path = args.make_path(args.value)
    sink = make_sink(args.output)
    with CensysApiAccessObject(credentials) as access:
        search = CensysSearch(access, paging=not args.no_paging)
        count = search.run(path, sink)
    LOGGER.info("Wrote %d page(s)", count)


def main(manual_args=None):
    """
    Main cli function.

    :param manual_args: The arguments to parse, or None to use sys.argv
    :return: The process exit status
    """
    parser = get_parser()
    args = parser.parse_args(manual_args)
    configure_logging(args.verbose)
    try:
        run(args)
    except CensysException as err:
        print(err, file=sys.stderr)
        return 1
    return 0
