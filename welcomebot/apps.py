"""
Mattermost Apps data types: manifest, bindings, forms, call requests and
call responses, with conversion to and from their JSON wire format.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Tuple

# Expand levels
EXPAND_ALL = "all"
EXPAND_SUMMARY = "summary"

# Channel types that are one-to-one or group direct conversations
DIRECT_CHANNEL_TYPES = ("D", "G")


@dataclass(frozen=True)
class Expand:
    """Which context entities the platform includes when making a call."""
    acting_user: Optional[str] = None
    acting_user_access_token: Optional[str] = None
    channel: Optional[str] = None
    team: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        return {k: v for k, v in self.__dict__.items() if v}


@dataclass(frozen=True)
class Call:
    path: str
    expand: Optional[Expand] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"path": self.path}
        if self.expand:
            data["expand"] = self.expand.to_dict()
        return data


@dataclass(frozen=True)
class Field:
    name: str
    type: str = "text"
    label: Optional[str] = None
    description: Optional[str] = None
    is_required: bool = False
    subtype: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "label": self.label or self.name,
        }
        if self.description:
            data["description"] = self.description
        if self.is_required:
            data["is_required"] = True
        if self.subtype:
            data["subtype"] = self.subtype
        return data


@dataclass(frozen=True)
class Form:
    title: str
    submit: Call
    icon: Optional[str] = None
    fields: Tuple[Field, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "title": self.title,
            "submit": self.submit.to_dict(),
            "fields": [f.to_dict() for f in self.fields],
        }
        if self.icon:
            data["icon"] = self.icon
        return data


@dataclass(frozen=True)
class Binding:
    label: Optional[str] = None
    location: Optional[str] = None
    icon: Optional[str] = None
    description: Optional[str] = None
    hint: Optional[str] = None
    submit: Optional[Call] = None
    form: Optional[Form] = None
    bindings: Tuple["Binding", ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for key in ("location", "label", "icon", "description", "hint"):
            value = getattr(self, key)
            if value:
                data[key] = value
        if self.submit:
            data["submit"] = self.submit.to_dict()
        if self.form:
            data["form"] = self.form.to_dict()
        if self.bindings:
            data["bindings"] = [b.to_dict() for b in self.bindings]
        return data


@dataclass(frozen=True)
class Manifest:
    app_id: str
    version: str
    display_name: str
    homepage_url: str
    root_url: str
    icon: Optional[str] = None
    requested_permissions: Tuple[str, ...] = ()
    requested_locations: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "app_id": self.app_id,
            "version": self.version,
            "display_name": self.display_name,
            "homepage_url": self.homepage_url,
            "requested_permissions": list(self.requested_permissions),
            "requested_locations": list(self.requested_locations),
            "http": {"root_url": self.root_url},
        }
        if self.icon:
            data["icon"] = self.icon
        return data


@dataclass
class User:
    id: Optional[str] = None
    username: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["User"]:
        if not isinstance(data, dict):
            return None
        return cls(id=data.get("id"), username=data.get("username"))


@dataclass
class Channel:
    id: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    display_name: Optional[str] = None
    team_id: Optional[str] = None

    @property
    def is_direct(self) -> bool:
        return self.type in DIRECT_CHANNEL_TYPES

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Channel"]:
        if not isinstance(data, dict):
            return None
        return cls(
            id=data.get("id"),
            type=data.get("type"),
            name=data.get("name"),
            display_name=data.get("display_name"),
            team_id=data.get("team_id"),
        )


@dataclass
class Team:
    id: Optional[str] = None
    name: Optional[str] = None
    display_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Team"]:
        if not isinstance(data, dict):
            return None
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            display_name=data.get("display_name"),
        )


@dataclass
class Context:
    """The expanded context the platform sends along with a call."""
    app_id: Optional[str] = None
    bot_user_id: Optional[str] = None
    bot_access_token: Optional[str] = None
    mattermost_site_url: Optional[str] = None
    acting_user: Optional[User] = None
    channel: Optional[Channel] = None
    team: Optional[Team] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Context":
        if not isinstance(data, dict):
            return cls()
        return cls(
            app_id=data.get("app_id"),
            bot_user_id=data.get("bot_user_id"),
            bot_access_token=data.get("bot_access_token"),
            mattermost_site_url=data.get("mattermost_site_url"),
            acting_user=User.from_dict(data.get("acting_user")),
            channel=Channel.from_dict(data.get("channel")),
            team=Team.from_dict(data.get("team")),
        )


@dataclass
class CallRequest:
    path: Optional[str] = None
    values: Dict[str, Any] = field(default_factory=dict)
    context: Context = field(default_factory=Context)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CallRequest":
        values = data.get("values")
        return cls(
            path=data.get("path"),
            values=values if isinstance(values, dict) else {},
            context=Context.from_dict(data.get("context")),
        )

    def value(self, name: str, allow_empty: bool = False) -> Optional[str]:
        """Return a submitted form value as a string, or None if missing.

        Empty strings count as missing unless allow_empty is set.
        """
        value = self.values.get(name)
        # select fields submit {"label": ..., "value": ...}
        if isinstance(value, dict):
            value = value.get("value")
        if value is None or (value == "" and not allow_empty):
            return None
        return str(value)


def text_response(text: str) -> Dict[str, Any]:
    return {"type": "ok", "text": text}


def data_response(data: Any) -> Dict[str, Any]:
    return {"type": "ok", "data": data}


def error_response(text: str) -> Dict[str, Any]:
    return {"type": "error", "text": text}
