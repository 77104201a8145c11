"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from minibash.container import container
from minibash.use_cases.files.list_directory import ListDirectoryUseCase


def get_list_directory_uc() -> ListDirectoryUseCase:
    """
    Get the list directory use case from the container.

    Returns:
        ListDirectoryUseCase: The list directory use case instance
    """
    return container.get_list_directory_use_case()
