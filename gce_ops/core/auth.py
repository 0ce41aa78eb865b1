"""
GCE Ops - Authentication Manager

This module handles Google Cloud authentication and Compute Engine
API client creation.
"""

import google.auth
from google.auth.exceptions import DefaultCredentialsError, RefreshError
from google.auth.transport.requests import Request
from googleapiclient import discovery
import googleapiclient.http
import google_auth_httplib2
import httplib2

from gce_ops.core.exceptions import AuthenticationError
from gce_ops.core.config import VERSION


class AuthManager:
    """
    Manages Google Cloud authentication and API client creation.

    This class:
    1. Gets credentials using Application Default Credentials (ADC)
    2. Validates and refreshes credentials if needed
    3. Creates an authenticated Compute Engine API client

    Usage:
        auth = AuthManager()
        compute = auth.get_compute()
    """

    def __init__(self, logger=None):
        """Initialize the authentication manager."""
        self.logger = logger
        self._credentials = None
        self._project = None
        self._compute = None

    def get_credentials(self):
        """
        Get and validate Google Cloud credentials.

        ADC looks for credentials in this order:
        1. GOOGLE_APPLICATION_CREDENTIALS environment variable
        2. User credentials from gcloud auth application-default login
        3. GCE metadata service (if running on Google Cloud)

        Returns:
            tuple: (credentials, project_id)

        Raises:
            AuthenticationError: If credentials not found or invalid
        """
        try:
            credentials, project = google.auth.default()
        except DefaultCredentialsError:
            raise AuthenticationError(
                "No credentials found. You need to authenticate first.",
                fix="gcloud auth application-default login"
            )

        if not credentials.valid and getattr(credentials, 'expired', False):
            if not getattr(credentials, 'refresh_token', None):
                raise AuthenticationError(
                    "Credentials are invalid",
                    fix="gcloud auth application-default login"
                )
            try:
                if self.logger:
                    self.logger.debug("Refreshing expired credentials...")
                credentials.refresh(Request())
            except RefreshError:
                raise AuthenticationError(
                    "Credentials expired and refresh failed",
                    fix="gcloud auth application-default login"
                )

        return credentials, project

    def get_compute(self):
        """
        Get an authenticated Compute Engine v1 API client.

        Returns:
            googleapiclient discovery resource for compute v1

        Raises:
            AuthenticationError: If authentication fails
        """
        if not self._credentials:
            self._credentials, self._project = self.get_credentials()

        if not self._compute:
            def _request_builder(http, *args, **kwargs):
                """Inject User-Agent header for usage tracking."""
                headers = kwargs.setdefault('headers', {})
                headers['user-agent'] = f'gce_ops-{VERSION}'
                auth_http = google_auth_httplib2.AuthorizedHttp(
                    self._credentials,
                    http=httplib2.Http()
                )
                return googleapiclient.http.HttpRequest(auth_http, *args, **kwargs)

            try:
                self._compute = discovery.build(
                    'compute',
                    'v1',
                    credentials=self._credentials,
                    cache_discovery=False,
                    requestBuilder=_request_builder
                )
            except Exception as e:
                raise AuthenticationError(
                    f"Failed to create GCP API client: {str(e)}"
                )

        return self._compute

    def get_project(self):
        """
        Get the project ID attached to the credentials, if any.

        Raises:
            AuthenticationError: If not authenticated
        """
        if not self._credentials:
            self._credentials, self._project = self.get_credentials()

        return self._project
