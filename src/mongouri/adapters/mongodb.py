"""MongoDB client adapter built on pymongo."""

import logging
from typing import Any

from pymongo import MongoClient
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from ..constants import CLIENT_TIMEOUT, SLAVE_OK_READ_PREFERENCE
from ..uri.connection_string import ConnectionString
from ..uri.logging import log_connection, OperationTimer, sanitize_uri
from .base import BaseClientAdapter

logger = logging.getLogger(__name__)

# Parsed option name (lower case) -> MongoClient keyword argument
CLIENT_OPTION_NAMES = {
    "connecttimeoutms": "connectTimeoutMS",
    "sockettimeoutms": "socketTimeoutMS",
    "maxpoolsize": "maxPoolSize",
    "minpoolsize": "minPoolSize",
    "maxidletimems": "maxIdleTimeMS",
    "waitqueuetimeoutms": "waitQueueTimeoutMS",
    "wtimeoutms": "wTimeoutMS",
    "w": "w",
    "journal": "journal",
    "ssl": "tls",
    "replicaset": "replicaSet",
    "readpreference": "readPreference",
    "authsource": "authSource",
    "authmechanism": "authMechanism",
    "appname": "appName",
}

# Accepted by the parser but no longer understood by pymongo 4
UNSUPPORTED_OPTIONS = frozenset(["waitqueuemultiple"])


class MongoDBAdapter(BaseClientAdapter):
    """Builds a pymongo MongoClient from a parsed connection string."""

    def __init__(self, connection_string: ConnectionString, timeout: float = CLIENT_TIMEOUT):
        """Initialize MongoDB adapter.

        Args:
            connection_string: Parsed connection string
            timeout: Default for connect, socket and server selection
                timeouts (seconds) when the URI does not set them
        """
        super().__init__(connection_string, timeout)

    @property
    def uri(self) -> str:
        """Connection string for logging (password redacted)."""
        return sanitize_uri(self.connection_string.string)

    def client_kwargs(self) -> dict[str, Any]:
        """Map the parsed connection string onto MongoClient keyword arguments.

        Returns:
            Keyword arguments for ``MongoClient(**kwargs)``
        """
        uri = self.connection_string
        kwargs: dict[str, Any] = {
            "host": [entry.host_and_port for entry in uri.hosts],
        }

        if uri.username is not None:
            kwargs["username"] = uri.username
            kwargs["password"] = uri.password
            if uri.database:
                kwargs["authSource"] = uri.database

        slave_ok = False
        for key, value in uri.options.items():
            name = key.lower()
            if name in CLIENT_OPTION_NAMES:
                kwargs[CLIENT_OPTION_NAMES[name]] = value
            elif name == "slaveok":
                slave_ok = value
            elif name in UNSUPPORTED_OPTIONS:
                logger.debug(f"Dropping option not supported by pymongo: {key}")
            else:
                logger.debug(f"Dropping unknown option: {key}")

        if slave_ok:
            kwargs.setdefault("readPreference", SLAVE_OK_READ_PREFERENCE)

        if uri.read_preference_tags:
            if "readPreference" in kwargs:
                kwargs["readPreferenceTags"] = [
                    ",".join(f"{key}:{value}" for key, value in tags.items())
                    for tags in uri.read_preference_tags
                ]
            else:
                logger.debug("Dropping readPreferenceTags: no readPreference given")

        timeout_ms = int(self.timeout * 1000)
        kwargs.setdefault("serverSelectionTimeoutMS", timeout_ms)
        kwargs.setdefault("connectTimeoutMS", timeout_ms)
        kwargs.setdefault("socketTimeoutMS", timeout_ms)

        return kwargs

    def connect(self) -> None:
        """Create the client and verify the deployment answers a ping."""
        with OperationTimer() as timer:
            try:
                self.client = MongoClient(**self.client_kwargs())
                self.client.admin.command("ping")

            except ServerSelectionTimeoutError as e:
                error_msg = f"Failed to connect to MongoDB (timeout): {e}"
                logger.error(error_msg)
                self.close()
                log_connection(self.uri, success=False, error=error_msg)
                raise ConnectionError(error_msg) from e

            except PyMongoError as e:
                error_msg = f"Failed to connect to MongoDB: {e}"
                logger.error(error_msg)
                self.close()
                log_connection(self.uri, success=False, error=error_msg)
                raise ConnectionError(error_msg) from e

        log_connection(self.uri, success=True, duration=timer.duration)
        logger.info(f"Connected to MongoDB: {self.uri}")

    def ping(self) -> float:
        """Round-trip a ping command and return its duration in seconds."""
        if self.client is None:
            raise ConnectionError("Not connected. Call connect() first.")

        with OperationTimer() as timer:
            try:
                self.client.admin.command("ping")
            except PyMongoError as e:
                error_msg = f"MongoDB ping failed: {e}"
                logger.error(error_msg)
                raise ConnectionError(error_msg) from e

        return timer.duration

    def close(self) -> None:
        """Close the client connection."""
        if self.client is not None:
            try:
                self.client.close()
                logger.info(f"Closed MongoDB connection to {self.uri}")
            except PyMongoError as e:
                logger.warning(f"Error closing MongoDB connection: {e}")
            finally:
                self.client = None
