import pytest

from gnsskit.settings import (
    IpServer,
    Settings,
    auto_publish,
    check_uniqueness_of_ips,
    check_uniqueness_of_ips_ports,
    check_uniqueness_of_ips_ports_vsm,
    check_uniqueness_of_ips_vsm,
)

_CHECKS = [
    check_uniqueness_of_ips,
    check_uniqueness_of_ips_ports,
    check_uniqueness_of_ips_vsm,
    check_uniqueness_of_ips_ports_vsm,
]


@pytest.mark.parametrize("check", _CHECKS)
def test_default_settings_pass_every_check(check):
    assert check(Settings()) == []


def test_distinct_settings_pass_every_check():
    settings = Settings(
        device_tcp_port="28784",
        tcp_ip_server="IPS1",
        tcp_port=6000,
        udp_ip_server="IPS2",
        udp_port=6001,
        rtk_ip_server=[IpServer("IPS3", 6002), IpServer("IPS4", 6003)],
        ins_vsm_ip_server="IPS5",
        ins_vsm_ip_server_port=6004,
    )
    assert [check(settings) for check in _CHECKS] == [[], [], [], []]


def test_tcp_and_udp_share_ip_server():
    settings = Settings(tcp_ip_server="IPS1", udp_ip_server="IPS1")
    assert check_uniqueness_of_ips(settings) == [
        "stream_device.tcp.ip_server and stream_device.udp.ip_server "
        "cannot use the same IP server"
    ]


def test_rtk_server_clash_names_server_number():
    settings = Settings(
        tcp_ip_server="IPS1",
        rtk_ip_server=[IpServer("IPS2", 0), IpServer("IPS1", 0)],
    )
    errors = check_uniqueness_of_ips(settings)
    assert len(errors) == 1
    assert "rtk_settings.ip_server_2.id" in errors[0]


def test_two_rtk_servers_with_same_id():
    settings = Settings(rtk_ip_server=[IpServer("IPS3", 0), IpServer("IPS3", 0)])
    assert check_uniqueness_of_ips(settings) == [
        "rtk_settings.ip_server_1.id and rtk_settings.ip_server_2.id "
        "cannot use the same IP server"
    ]


def test_two_rtk_servers_with_empty_ids_are_fine():
    settings = Settings(rtk_ip_server=[IpServer("", 0), IpServer("", 0)])
    assert check_uniqueness_of_ips(settings) == []


def test_tcp_port_same_as_device_port():
    settings = Settings(tcp_port=28784, device_tcp_port="28784")
    assert check_uniqueness_of_ips_ports(settings) == [
        "stream_device.tcp.port and device port cannot be the same"
    ]


def test_tcp_port_same_as_rtk_port():
    settings = Settings(
        tcp_port=6000, rtk_ip_server=[IpServer("IPS1", 6000), IpServer("IPS2", 7)]
    )
    errors = check_uniqueness_of_ips_ports(settings)
    assert errors == [
        "stream_device.tcp.port and rtk_settings.ip_server_1.port cannot be the same!"
    ]


def test_rtk_ports_clash():
    settings = Settings(rtk_ip_server=[IpServer("A", 7000), IpServer("B", 7000)])
    errors = check_uniqueness_of_ips_ports(settings)
    assert len(errors) == 1
    assert "ip_server_1.port and rtk_settings.ip_server_2.port" in errors[0]


def test_vsm_ip_server_clashes_everywhere():
    settings = Settings(
        tcp_ip_server="IPS1",
        udp_ip_server="IPS1",
        rtk_ip_server=[IpServer("IPS1", 0)],
        ins_vsm_ip_server="IPS1",
    )
    errors = check_uniqueness_of_ips_vsm(settings)
    assert len(errors) == 3
    assert errors[2] == (
        "ins_vsm.ip_server.id and rtk_settings.ip_server_1.id "
        "cannot use the same IP server"
    )


def test_vsm_port_clashes_everywhere():
    settings = Settings(
        device_tcp_port="6000",
        tcp_port=6000,
        udp_port=6000,
        rtk_ip_server=[IpServer("X", 1), IpServer("Y", 6000)],
        ins_vsm_ip_server_port=6000,
    )
    errors = check_uniqueness_of_ips_ports_vsm(settings)
    assert len(errors) == 4
    assert errors[0] == "device port  and ins_vsm.ip_server.port cannot be the same"
    assert "rtk_settings.ip_server_2.port" in errors[3]


def test_auto_publish_turns_on_publishers():
    settings = Settings(auto_publish=True, configure_rx=False)
    assert auto_publish(settings) == []
    assert settings.publish_gpgga is True
    assert settings.publish_twist is True
    assert settings.publish_tf is True


def test_auto_publish_leaves_tf_off_when_ecef_tf_published():
    settings = Settings(auto_publish=True, configure_rx=False, publish_tf_ecef=True)
    auto_publish(settings)
    assert settings.publish_tf is False
    assert settings.publish_imu is True


def test_auto_publish_warns_when_configuring_rx():
    settings = Settings(auto_publish=True, configure_rx=True)
    assert auto_publish(settings) == [
        "auto_publish has no effect if configure_rx is true."
    ]
    assert settings.publish_gpgga is False


def test_auto_publish_off_changes_nothing():
    settings = Settings(auto_publish=False, configure_rx=False)
    assert auto_publish(settings) == []
    assert settings == Settings(auto_publish=False, configure_rx=False)