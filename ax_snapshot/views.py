from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing_extensions import Required, TypedDict


class PropertyKind(str, Enum):
	"""Value kinds for the accessibility properties the serializer knows about."""

	STRING = 'string'
	BOOLEAN = 'boolean'
	TRISTATE = 'tristate'
	NUMBER = 'number'
	TOKEN = 'token'


# Known property names (lower-cased) and the kind of value each must carry
PROPERTY_KINDS: dict[str, PropertyKind] = {
	'keyshortcuts': PropertyKind.STRING,
	'roledescription': PropertyKind.STRING,
	'valuetext': PropertyKind.STRING,
	'disabled': PropertyKind.BOOLEAN,
	'expanded': PropertyKind.BOOLEAN,
	'focused': PropertyKind.BOOLEAN,
	'focusable': PropertyKind.BOOLEAN,
	'hidden': PropertyKind.BOOLEAN,
	'modal': PropertyKind.BOOLEAN,
	'multiline': PropertyKind.BOOLEAN,
	'multiselectable': PropertyKind.BOOLEAN,
	'readonly': PropertyKind.BOOLEAN,
	'required': PropertyKind.BOOLEAN,
	'selected': PropertyKind.BOOLEAN,
	'checked': PropertyKind.TRISTATE,
	'pressed': PropertyKind.TRISTATE,
	'level': PropertyKind.NUMBER,
	'valuemax': PropertyKind.NUMBER,
	'valuemin': PropertyKind.NUMBER,
	'autocomplete': PropertyKind.TOKEN,
	'editable': PropertyKind.TOKEN,
	'haspopup': PropertyKind.TOKEN,
	'invalid': PropertyKind.TOKEN,
	'orientation': PropertyKind.TOKEN,
}

PropertyValue = str | bool | int | float


# Input models (Chrome DevTools Protocol Accessibility domain)
class AXValue(BaseModel):
	"""A single computed AX value."""

	type: str | None = Field(None, description='The type of this value')
	value: Any | None = Field(None, description='The computed value of this property')


class AXProperty(BaseModel):
	"""An accessibility property."""

	name: str = Field(description='The name of this property')
	value: AXValue = Field(description='The value of this property')


class AXNodePayload(BaseModel):
	"""One raw record of an accessibility snapshot."""

	model_config = ConfigDict(populate_by_name=True, extra='ignore', frozen=True)

	nodeId: str = Field(
		validation_alias=AliasChoices('nodeId', 'id'), description='Unique identifier for this node within the snapshot'
	)
	ignored: bool = Field(default=False, description='Whether this node is ignored for accessibility')
	role: AXValue | None = Field(None, description="This Node's role, whether explicit or implicit")
	name: AXValue | None = Field(None, description='The accessible name for this Node')
	description: AXValue | None = Field(None, description='The accessible description for this Node')
	value: AXValue | None = Field(None, description='The value for this Node')
	properties: list[AXProperty] | None = Field(None, description='All other properties')
	childIds: list[str] | None = Field(None, description="IDs for each of this node's child nodes")
	backendDOMNodeId: int | None = Field(None, description='The backend ID for the associated DOM node, if any')


# Output record
class SerializedAXNode(TypedDict, total=False):
	"""Canonical consumer-facing record for one accessibility node.

	Only `role` and `name` are guaranteed; every other key is present only when the
	underlying node carries the matching property.
	"""

	role: Required[str]
	name: Required[str]

	value: Any
	description: Any
	keyshortcuts: str
	roledescription: str
	valuetext: str

	disabled: bool
	expanded: bool
	focused: bool
	modal: bool
	multiline: bool
	multiselectable: bool
	readonly: bool
	required: bool
	selected: bool

	checked: bool | str
	pressed: bool | str

	level: int | float
	valuemax: int | float
	valuemin: int | float

	autocomplete: str
	haspopup: str
	invalid: str
	orientation: str

	children: list['SerializedAXNode']
