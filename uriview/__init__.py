from .span import Span, Cursor
from .exceptions import UriViewException, InvalidInput, ParseFailure, ErrorKind, TraceEntry
from .scheme import Scheme, parse_scheme
from .authority import Authority, parse_authority
from .host import Host, HostName, IPv4, parse_host, parse_ip, parse_hostname
from .port import parse_port
from .path import parse_path
from .query import QueryParam, parse_query, parse_fragment
from .uri import URI, parse_uri, parse


__version__ = '0.1.0'
