"""
Entry records held by the shell list models.

Alert and PIN prompt entries keep their known fields next to an open mapping
of pass-through fields. The message is deep-copied on the way in and out
and re-emitted with its original key order.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

from .payload_schema import file_url

ALERT_INFO_KEY = "alertInfo"
PINCODE_PROMPT_INFO_KEY = "pincodePromptInfo"
TIMESTAMP_KEY = "timestamp"
PAYLOAD_ROLE = "payload"


def _split_info(message: Mapping[str, Any], info_key: str) -> Tuple[Optional[Dict[str, Any]], Dict[str, Any]]:
    extra = copy.deepcopy(dict(message))
    info = extra.get(info_key)
    if isinstance(info, Mapping):
        del extra[info_key]
        return dict(info), extra
    return None, extra


def _join_info(
    extra: Mapping[str, Any],
    info_key: str,
    info: Optional[Mapping[str, Any]],
    key_order: Tuple[str, ...],
) -> Dict[str, Any]:
    fields = dict(extra)
    if info is not None:
        fields[info_key] = info
    # Keys in arrival order first, then anything set after construction.
    message = {key: fields[key] for key in key_order if key in fields}
    message.update((key, value) for key, value in fields.items() if key not in message)
    return copy.deepcopy(message)


def _pick_timestamp(extra: Mapping[str, Any], info: Optional[Mapping[str, Any]]) -> Any:
    if TIMESTAMP_KEY in extra:
        return extra[TIMESTAMP_KEY]
    if info is not None:
        return info.get(TIMESTAMP_KEY)
    return None


@dataclass(slots=True)
class AlertEntry:
    """An active alert; `modal` entries are shown ahead of the rest."""

    ROLE_NAMES: ClassVar[Tuple[str, ...]] = (TIMESTAMP_KEY, "modal", ALERT_INFO_KEY, PAYLOAD_ROLE)

    timestamp: Any
    modal: bool = False
    alert_info: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    key_order: Tuple[str, ...] = field(default=(), repr=False, compare=False)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> "AlertEntry":
        info, extra = _split_info(message, ALERT_INFO_KEY)
        modal = info is not None and info.get("modal") is True
        return cls(
            timestamp=_pick_timestamp(extra, info),
            modal=modal,
            alert_info=info,
            extra=extra,
            key_order=tuple(message),
        )

    def to_message(self) -> Dict[str, Any]:
        return _join_info(self.extra, ALERT_INFO_KEY, self.alert_info, self.key_order)

    def role_value(self, name: str) -> Any:
        if name == TIMESTAMP_KEY:
            return self.timestamp
        if name == "modal":
            return self.modal
        if name == ALERT_INFO_KEY:
            return copy.deepcopy(self.alert_info or {})
        if name == PAYLOAD_ROLE:
            return self.to_message()
        return None


@dataclass(slots=True)
class PincodePromptEntry:
    """A pending PIN-entry prompt."""

    ROLE_NAMES: ClassVar[Tuple[str, ...]] = (TIMESTAMP_KEY, PINCODE_PROMPT_INFO_KEY, PAYLOAD_ROLE)

    timestamp: Any
    prompt_info: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    key_order: Tuple[str, ...] = field(default=(), repr=False, compare=False)

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> "PincodePromptEntry":
        info, extra = _split_info(message, PINCODE_PROMPT_INFO_KEY)
        return cls(timestamp=_pick_timestamp(extra, info), prompt_info=info, extra=extra, key_order=tuple(message))

    def to_message(self) -> Dict[str, Any]:
        return _join_info(self.extra, PINCODE_PROMPT_INFO_KEY, self.prompt_info, self.key_order)

    def role_value(self, name: str) -> Any:
        if name == TIMESTAMP_KEY:
            return self.timestamp
        if name == PINCODE_PROMPT_INFO_KEY:
            return copy.deepcopy(self.prompt_info or {})
        if name == PAYLOAD_ROLE:
            return self.to_message()
        return None


@dataclass(frozen=True, slots=True)
class ApplicationEntry:
    ROLE_NAMES: ClassVar[Tuple[str, ...]] = ("appId", "icon")

    app_id: Any
    icon: str

    @classmethod
    def from_descriptor(cls, descriptor: Mapping[str, Any]) -> "ApplicationEntry":
        # Without the scheme the view resolves the icon relative to its bundled resources.
        return cls(app_id=descriptor.get("id"), icon=file_url(descriptor.get("icon")))

    @property
    def sort_key(self) -> str:
        return "" if self.app_id is None else str(self.app_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"appId": self.app_id, "icon": self.icon}

    def role_value(self, name: str) -> Any:
        return self.to_dict().get(name)


@dataclass(frozen=True, slots=True)
class PackageEntry:
    """An installable package as listed by the package manager snapshot."""

    ROLE_NAMES: ClassVar[Tuple[str, ...]] = (
        "packageId",
        "version",
        "size",
        "loc_name",
        "vendor",
        "vendorUrl",
        "icon",
        "miniIcon",
        "userInstalled",
    )

    package_id: Any
    version: Any = None
    size: Any = None
    loc_name: Any = None
    vendor: Any = None
    vendor_url: Any = None
    icon: str = ""
    mini_icon: str = ""
    user_installed: bool = False

    @classmethod
    def from_descriptor(cls, descriptor: Mapping[str, Any]) -> "PackageEntry":
        return cls(
            package_id=descriptor.get("id"),
            version=descriptor.get("version"),
            size=descriptor.get("size"),
            loc_name=descriptor.get("loc_name"),
            vendor=descriptor.get("vendor"),
            vendor_url=descriptor.get("vendorUrl"),
            icon=file_url(descriptor.get("icon")),
            mini_icon=file_url(descriptor.get("miniIcon")),
            user_installed=descriptor.get("userInstalled") is True,
        )

    @property
    def sort_key(self) -> str:
        return "" if self.package_id is None else str(self.package_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "packageId": self.package_id,
            "version": self.version,
            "size": self.size,
            "loc_name": self.loc_name,
            "vendor": self.vendor,
            "vendorUrl": self.vendor_url,
            "icon": self.icon,
            "miniIcon": self.mini_icon,
            "userInstalled": self.user_installed,
        }

    def role_value(self, name: str) -> Any:
        return self.to_dict().get(name)
