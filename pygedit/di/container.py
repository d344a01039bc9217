from __future__ import annotations

from pathlib import Path

from pygedit.domain.interfaces import IFileService
from pygedit.services.config.app_config import AppConfig, build_app_config
from pygedit.services.file_service import FileService
from pygedit.services.ui.adapters import QtFileDialogService, QtMessageService
from pygedit.services.ui.main_window import MainWindow
from pygedit.services.ui.ports.dialogs import IFileDialogService
from pygedit.services.ui.ports.messages import IMessageService
from pygedit.services.ui.presenters import MainPresenter
from pygedit.utils.constants import APP_NAME


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the view and binds a MainPresenter to it
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        files: IFileService | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService(encoding=self.config.encoding())
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

    @staticmethod
    def default(*, explicit_ini: Path | None = None) -> Container:
        return Container(config=build_app_config(explicit_ini=explicit_ini))

    # ---------- UI factories ----------

    def build_main_presenter(self, view: MainWindow, *, app_title: str = APP_NAME) -> MainPresenter:
        return MainPresenter(
            view=view,
            files=self.file_service,
            messages=self.messages,
            dialogs=self.dialogs,
            app_title=app_title,
            version=self.config.get_version(),
            status_timeout_ms=self.config.status_timeout_ms(),
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """
        Create the Qt MainWindow, attach its presenter and load the start file if given.
        """
        window = MainWindow(app_title=app_title, tab_width=self.config.tab_width())
        presenter = self.build_main_presenter(window, app_title=app_title)
        window.attach_presenter(presenter)
        presenter.start(start_path)
        return window
