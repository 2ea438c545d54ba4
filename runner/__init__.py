"""
Deploy Runner Package
"""

from .deploy_runner import CONTRACT_NAME, DeployRunner

__all__ = ['CONTRACT_NAME', 'DeployRunner']
