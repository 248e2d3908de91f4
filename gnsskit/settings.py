"""Receiver settings and consistency checks on them."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "IpServer",
    "Settings",
    "check_uniqueness_of_ips",
    "check_uniqueness_of_ips_ports",
    "check_uniqueness_of_ips_vsm",
    "check_uniqueness_of_ips_ports_vsm",
    "auto_publish",
]

_AUTO_PUBLISHED = (
    "publish_gpst",
    "publish_navsatfix",
    "publish_gpsfix",
    "publish_pose",
    "publish_diagnostics",
    "publish_aimplusstatus",
    "publish_galauthstatus",
    "publish_gpgga",
    "publish_gprmc",
    "publish_gpgsa",
    "publish_gpgsv",
    "publish_measepoch",
    "publish_pvtcartesian",
    "publish_pvtgeodetic",
    "publish_basevectorcart",
    "publish_basevectorgeod",
    "publish_poscovcartesian",
    "publish_poscovgeodetic",
    "publish_velcovcartesian",
    "publish_velcovgeodetic",
    "publish_atteuler",
    "publish_attcoveuler",
    "publish_insnavcart",
    "publish_insnavgeod",
    "publish_imusetup",
    "publish_velsensorsetup",
    "publish_exteventinsnavgeod",
    "publish_exteventinsnavcart",
    "publish_extsensormeas",
    "publish_imu",
    "publish_localization",
    "publish_localization_ecef",
    "publish_twist",
)


@dataclass
class IpServer:
    """An IP server of the receiver used for corrections."""

    id: str = ""
    port: int = 0


@dataclass
class Settings:
    """The subset of driver settings that the consistency checks inspect."""

    device_tcp_port: str = ""
    tcp_ip_server: str = ""
    tcp_port: int = 0
    udp_ip_server: str = ""
    udp_port: int = 0
    rtk_ip_server: list[IpServer] = field(default_factory=list)
    ins_vsm_ip_server: str = ""
    ins_vsm_ip_server_port: int = 0
    auto_publish: bool = False
    configure_rx: bool = True
    publish_tf: bool = False
    publish_tf_ecef: bool = False
    publish_gpst: bool = False
    publish_navsatfix: bool = False
    publish_gpsfix: bool = False
    publish_pose: bool = False
    publish_diagnostics: bool = False
    publish_aimplusstatus: bool = False
    publish_galauthstatus: bool = False
    publish_gpgga: bool = False
    publish_gprmc: bool = False
    publish_gpgsa: bool = False
    publish_gpgsv: bool = False
    publish_measepoch: bool = False
    publish_pvtcartesian: bool = False
    publish_pvtgeodetic: bool = False
    publish_basevectorcart: bool = False
    publish_basevectorgeod: bool = False
    publish_poscovcartesian: bool = False
    publish_poscovgeodetic: bool = False
    publish_velcovcartesian: bool = False
    publish_velcovgeodetic: bool = False
    publish_atteuler: bool = False
    publish_attcoveuler: bool = False
    publish_insnavcart: bool = False
    publish_insnavgeod: bool = False
    publish_imusetup: bool = False
    publish_velsensorsetup: bool = False
    publish_exteventinsnavgeod: bool = False
    publish_exteventinsnavcart: bool = False
    publish_extsensormeas: bool = False
    publish_imu: bool = False
    publish_localization: bool = False
    publish_localization_ecef: bool = False
    publish_twist: bool = False


def _rtk_pair_clash(servers: list[IpServer], attribute: str) -> bool:
    if len(servers) != 2:
        return False
    first = getattr(servers[0], attribute)
    return bool(first) and first == getattr(servers[1], attribute)


def check_uniqueness_of_ips(settings: Settings) -> list[str]:
    """Return the errors for IP servers that are used more than once."""
    errors: list[str] = []
    servers = settings.rtk_ip_server
    if settings.tcp_ip_server:
        if settings.tcp_ip_server == settings.udp_ip_server:
            errors.append(
                "stream_device.tcp.ip_server and stream_device.udp.ip_server "
                "cannot use the same IP server"
            )
        errors.extend(
            f"stream_device.tcp.ip_server and rtk_settings.ip_server_{number}.id "
            "cannot use the same IP server"
            for number, server in enumerate(servers, start=1)
            if settings.tcp_ip_server == server.id
        )
    if settings.udp_ip_server:
        errors.extend(
            f"stream_device.udp.ip_server and rtk_settings.ip_server_{number}.id "
            "cannot use the same IP server"
            for number, server in enumerate(servers, start=1)
            if settings.udp_ip_server == server.id
        )
    if _rtk_pair_clash(servers, "id"):
        errors.append(
            "rtk_settings.ip_server_1.id and rtk_settings.ip_server_2.id "
            "cannot use the same IP server"
        )
    return errors


def check_uniqueness_of_ips_ports(settings: Settings) -> list[str]:
    """Return the errors for IP server ports that are used more than once."""
    errors: list[str] = []
    servers = settings.rtk_ip_server
    if settings.tcp_port != 0:
        if str(settings.tcp_port) == settings.device_tcp_port:
            errors.append("stream_device.tcp.port and device port cannot be the same")
        errors.extend(
            f"stream_device.tcp.port and rtk_settings.ip_server_{number}.port "
            "cannot be the same!"
            for number, server in enumerate(servers, start=1)
            if settings.tcp_port == server.port
        )
    if _rtk_pair_clash(servers, "port"):
        errors.append(
            "rtk_settings.ip_server_1.port and rtk_settings.ip_server_2.port "
            "cannot be the same"
        )
    return errors


def check_uniqueness_of_ips_vsm(settings: Settings) -> list[str]:
    """Return the errors for a VSM IP server shared with another stream."""
    errors: list[str] = []
    vsm = settings.ins_vsm_ip_server
    if not vsm:
        return errors
    if settings.tcp_ip_server and settings.tcp_ip_server == vsm:
        errors.append(
            "stream_device.tcp.ip_server and ins_vsm.ip_server.id "
            "cannot use the same IP server"
        )
    if settings.udp_ip_server and settings.udp_ip_server == vsm:
        errors.append(
            "stream_device.udp.ip_server and ins_vsm.ip_server.id "
            "cannot use the same IP server"
        )
    errors.extend(
        f"ins_vsm.ip_server.id and rtk_settings.ip_server_{number}.id "
        "cannot use the same IP server"
        for number, server in enumerate(settings.rtk_ip_server, start=1)
        if vsm == server.id
    )
    return errors


def check_uniqueness_of_ips_ports_vsm(settings: Settings) -> list[str]:
    """Return the errors for a VSM IP server port shared with another stream."""
    errors: list[str] = []
    port = settings.ins_vsm_ip_server_port
    if port == 0:
        return errors
    if str(port) == settings.device_tcp_port:
        errors.append("device port  and ins_vsm.ip_server.port cannot be the same")
    if settings.tcp_port != 0 and settings.tcp_port == port:
        errors.append(
            "stream_device.tcp.port and ins_vsm.ip_server.port cannot be the same"
        )
    if settings.udp_port != 0 and settings.udp_port == port:
        errors.append(
            "stream_device.udp.port and ins_vsm.ip_server.port cannot be the same"
        )
    errors.extend(
        f"ins_vsm.ip_server.port and rtk_settings.ip_server_{number}.port "
        "cannot use be same"
        for number, server in enumerate(settings.rtk_ip_server, start=1)
        if port == server.port
    )
    return errors


def auto_publish(settings: Settings) -> list[str]:
    """Turn on every publisher when auto-publishing without configuring the Rx.

    Modifies ``settings`` in place and returns any warnings.
    """
    if not settings.auto_publish:
        return []
    if settings.configure_rx:
        return ["auto_publish has no effect if configure_rx is true."]
    for name in _AUTO_PUBLISHED:
        setattr(settings, name, True)
    if not settings.publish_tf_ecef:
        settings.publish_tf = True
    return []