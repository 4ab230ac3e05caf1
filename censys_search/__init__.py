"""
Censys Search API client.

The easiest way to use this is through the 'censys-search' command (see cli).  From Python, create a
core.CensysApiAccessObject with a set of core.Credentials, build a request path with the functions in paths, and hand
both to a search.CensysSearch, which yields every page of the result.

Exception Hierarchy:
    Exception
    |
    +- CensysException
       |
       +- CensysConfigurationException
       |
       +- CensysRequestException
       |  |
       |  +- CensysTransportException
       |  |
       |  +- CensysDecodeException
       |
       +- CensysOutputException

Result Object Hierarchy:
    CensysResult
    |
    +- ErrorResult

Output Sink Hierarchy:
    OutputSink
    |
    +- StandardOutputSink
    |
    +- FileSink

Enumerations:
    - Resource: Enumeration of the API resources and their path templates

"""

__version__ = "1.0"
