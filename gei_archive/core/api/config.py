"""
API configuration module.

Provides configuration for the GitHub owned storage HTTP client and for
the upload core.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union
import ssl

from ..exceptions import InvalidInputError

DEFAULT_BASE_URL = 'https://uploads.github.com'
DEFAULT_SIZE_THRESHOLD = 100 * 1024 * 1024  # 100 MiB


@dataclass
class ProxyConfig:
    """
    Proxy configuration.
    
    Supports HTTP and HTTPS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    
    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None
        
        if self.username and self.password and '://' in self.url:
            protocol, rest = self.url.split('://', 1)
            return f"{protocol}://{self.username}:{self.password}@{rest}"
        
        return self.url


@dataclass
class SSLConfig:
    """SSL/TLS configuration."""
    verify: bool = True
    cert_file: Optional[str] = None
    key_file: Optional[str] = None
    ca_file: Optional[str] = None
    check_hostname: bool = True
    
    def create_ssl_context(self) -> Union[ssl.SSLContext, bool]:
        """Create SSL context from configuration."""
        if not self.verify:
            return False
        
        context = ssl.create_default_context()
        
        if self.ca_file:
            context.load_verify_locations(self.ca_file)
        
        if self.cert_file:
            context.load_cert_chain(self.cert_file, keyfile=self.key_file)
        
        context.check_hostname = self.check_hostname
        
        return context


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.
    
    A single part can be 100 MiB, so the total timeout is generous.
    """
    total: float = 3600.0
    connect: float = 30.0
    sock_read: float = 300.0
    sock_connect: float = 30.0
    
    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read,
            sock_connect=self.sock_connect
        )


@dataclass
class APIConfig:
    """
    Complete HTTP client configuration.
    
    The token is used as-is for the Authorization header; obtaining or
    refreshing it is up to the caller.
    """
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = 'gei-archive/1.0.0'
    token: Optional[str] = None
    
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    
    extra_headers: Dict[str, str] = field(default_factory=dict)
    
    log_level: int = 20  # logging.INFO
    
    # Connection pool settings
    limit_per_host: int = 10
    limit: int = 100
    
    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()
    
    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(proxy=ProxyConfig(url=proxy_url), **kwargs)
    
    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(ssl=SSLConfig(verify=False, check_hostname=False), **kwargs)
    
    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'limit': self.limit,
            'limit_per_host': self.limit_per_host,
            'ssl': self.ssl.create_ssl_context(),
        }
    
    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        headers = {
            'User-Agent': self.user_agent,
            'Accept': 'application/vnd.github+json',
            **self.extra_headers
        }
        if self.token:
            headers['Authorization'] = f"Bearer {self.token}"
        
        return {
            'headers': headers,
            'timeout': self.timeout.to_aiohttp_timeout(),
        }


@dataclass
class UploadConfig:
    """
    Upload core configuration.
    
    Attributes:
        size_threshold: Payloads larger than this go through the chunked
            protocol; it is also the part size.
        base_url: Storage base URL that Location headers resolve against.
    """
    size_threshold: int = DEFAULT_SIZE_THRESHOLD
    base_url: str = DEFAULT_BASE_URL
    
    def __post_init__(self):
        if isinstance(self.size_threshold, bool) or not isinstance(self.size_threshold, int):
            raise InvalidInputError("Size threshold must be an integer")
        if self.size_threshold <= 0:
            raise InvalidInputError("Size threshold must be positive")
        if not self.base_url:
            raise InvalidInputError("Base URL cannot be empty")
