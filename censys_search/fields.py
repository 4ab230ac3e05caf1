"""
Fields of the Censys Search Language for the hosts index
"""

# Fields are documented at https://search.censys.io/search/definitions?resource=hosts
FIELDS = (
    "ip",
    "name",
    "labels",
    "last_updated_at",
    "autonomous_system.asn",
    "autonomous_system.bgp_prefix",
    "autonomous_system.country_code",
    "autonomous_system.description",
    "autonomous_system.name",
    "dns.names",
    "dns.records",
    "dns.reverse_dns.names",
    "location.city",
    "location.continent",
    "location.coordinates.latitude",
    "location.coordinates.longitude",
    "location.country",
    "location.country_code",
    "location.postal_code",
    "location.province",
    "location.timezone",
    "operating_system.product",
    "operating_system.vendor",
    "operating_system.version",
    "services.banner",
    "services.banner_hash_sha256",
    "services.extended_service_name",
    "services.http.request.method",
    "services.http.request.uri",
    "services.http.response.body",
    "services.http.response.body_hash",
    "services.http.response.favicons.md5_hash",
    "services.http.response.headers.server",
    "services.http.response.html_tags",
    "services.http.response.html_title",
    "services.http.response.status_code",
    "services.jarm.fingerprint",
    "services.observed_at",
    "services.port",
    "services.service_name",
    "services.software.product",
    "services.software.uniform_resource_identifier",
    "services.software.vendor",
    "services.software.version",
    "services.source_ip",
    "services.ssh.server_host_key.fingerprint_sha256",
    "services.tls.certificates.leaf_data.fingerprint",
    "services.tls.certificates.leaf_data.issuer_dn",
    "services.tls.certificates.leaf_data.names",
    "services.tls.certificates.leaf_data.subject_dn",
    "services.tls.ja3s",
    "services.tls.version_selected",
    "services.transport_protocol",
    "services.truncated",
    "whois.network.cidrs",
    "whois.network.handle",
    "whois.network.name",
    "whois.organization.name",
)
"""The host fields available in Censys Search Language queries"""


def describe_fields():
    """
    Get the field list as printed by the 'fields' command.

    :return: The field names, one per line
    """
    return "\n".join(FIELDS)
