"""Módulos de recursos.

Por qué un paquete:
- Agrupa un módulo por tipo de recurso remoto (runs, SSH keys, ...).
- Cada clase recibe un `core.interfaces.requester.Requester` en su constructor.
"""

from tfe.adapters.resources.accounts import Accounts
from tfe.adapters.resources.organizations import Organizations
from tfe.adapters.resources.registry import Registry
from tfe.adapters.resources.runs import Runs
from tfe.adapters.resources.ssh_keys import SSHKeys
from tfe.adapters.resources.workspaces import Workspaces

__all__ = [
	"Accounts",
	"Organizations",
	"Registry",
	"Runs",
	"SSHKeys",
	"Workspaces",
]
