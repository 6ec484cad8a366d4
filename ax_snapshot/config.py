from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RootSelection(str, Enum):
	"""How the tree builder picks the root node of a snapshot."""

	FIRST_RECORD = 'first_record'
	UNREFERENCED = 'unreferenced'


class A11ySnapshotConfig(BaseModel):
	"""Settings for building and serializing accessibility snapshots."""

	model_config = ConfigDict(frozen=True)

	root_selection: RootSelection = Field(
		default=RootSelection.FIRST_RECORD,
		description='FIRST_RECORD trusts the snapshot to list the root first; '
		'UNREFERENCED picks the only node no other node lists as a child',
	)
	interesting_only: bool = Field(
		default=True, description='Whether snapshot() prunes nodes that are not interesting to assistive technology'
	)
