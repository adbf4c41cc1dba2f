from .employee_directory_client import EmployeeDirectoryClient

__all__ = ["EmployeeDirectoryClient"]
