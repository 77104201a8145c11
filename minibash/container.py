"""
Dependency injection container for managing application dependencies.
"""

import logging

from minibash.adapters.clock.system_clock import SystemClock
from minibash.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from minibash.ports.clock.clock_port import ClockPort
from minibash.ports.files.file_system_port import FileSystemPort
from minibash.use_cases.files.list_directory import ListDirectoryUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_clock(self) -> ClockPort:
        """
        Get clock adapter instance.

        Returns:
            ClockPort implementation
        """
        if "clock" not in self._instances:
            self._instances["clock"] = SystemClock()
        return self._instances["clock"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        """
        Get list directory use case with injected dependencies.

        Returns:
            Configured ListDirectoryUseCase
        """
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_file_system(), self.get_clock(), self._logger
            )
        return self._instances["list_directory_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
