"""Adapter and use-case wiring for the catalog browser runtime.

This module owns lazy construction of concrete REST adapters and use-case
objects that depend on values in :class:`infralib.viewmodels.settings_vm.SettingsVM`.
It is invoked by the web runtime before network actions.
"""

from __future__ import annotations

from typing import Optional

from ..adapters.catalog_rest import CatalogRestAdapter
from ..adapters.file_http import ArchiveFileHttpAdapter
from ..usecases.fetch_catalog import FetchCatalog
from ..viewmodels.settings_vm import SettingsVM


class AppController:
    """Create and cache runtime adapters/use-cases from settings state.

    Call chain:
        ``infralib.web_ui.runtime.WebRuntime`` creates one instance per page
        and reads ``uc_fetch``/``file_adapter`` after ``ensure_ready``.
    """

    def __init__(self, settings_vm: SettingsVM) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings_vm: State model containing the endpoint URL, file base URL
                and timeout preferences used to build adapter instances.
        """
        self.settings_vm = settings_vm
        self._catalog_adapter: Optional[CatalogRestAdapter] = None
        self._file_adapter: Optional[ArchiveFileHttpAdapter] = None
        self.uc_fetch: Optional[FetchCatalog] = None

    @property
    def catalog_adapter(self) -> Optional[CatalogRestAdapter]:
        """Return the cached adapter used for catalog requests."""
        return self._catalog_adapter

    @property
    def file_adapter(self) -> Optional[ArchiveFileHttpAdapter]:
        """Return the cached adapter used for archive entry downloads."""
        return self._file_adapter

    def reset(self) -> None:
        """Drop all cached adapters and use-cases.

        Side Effects:
            Clears runtime objects so the next ``ensure_ready`` call rebuilds
            everything from current settings values.
        """
        self._catalog_adapter = None
        self._file_adapter = None
        self.uc_fetch = None

    def ensure_ready(self) -> bool:
        """Ensure adapters/use-cases are available for network operations.

        Returns:
            ``True`` when dependencies are available, ``False`` when the
            endpoint URL is missing from settings.
        """
        if self._catalog_adapter and self._file_adapter and self.uc_fetch:
            return True

        endpoint = (self.settings_vm.endpoint_url or "").strip()
        if not endpoint:
            return False

        if self._catalog_adapter is None:
            self._catalog_adapter = CatalogRestAdapter(
                endpoint,
                request_timeout_s=self.settings_vm.request_timeout_s,
            )
            self.uc_fetch = FetchCatalog(self._catalog_adapter)

        if self._file_adapter is None:
            self._file_adapter = ArchiveFileHttpAdapter(
                self.settings_vm.files_base_url,
                download_timeout_s=self.settings_vm.download_timeout_s,
            )
        return True
