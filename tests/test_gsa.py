import pytest
from hypothesis import given
from hypothesis import strategies as st

from gnsskit.gsa import GsaParser
from gnsskit.parsing import ParseError


def make_body(svs=None, fix_mode="3", pdop="2.5", hdop="1.3", vdop="2.1"):
    if svs is None:
        svs = ["04", "05", "", "09", "12", "", "", "24", "", "", "", ""]
    return ["$GPGSA", "A", fix_mode, *svs, pdop, hdop, vdop, "*39"]


def test_fields_are_parsed():
    msg = GsaParser().parse(make_body(), frame_id="gnss")
    assert msg.frame_id == "gnss"
    assert msg.message_id == "$GPGSA"
    assert msg.auto_manual_mode == "A"
    assert msg.fix_mode == 3
    assert msg.sv_ids == [4, 5, 9, 12, 24]
    assert msg.pdop == pytest.approx(2.5)
    assert msg.hdop == pytest.approx(1.3)
    assert msg.vdop == pytest.approx(2.1)


def test_no_satellites_and_empty_dops():
    msg = GsaParser().parse(make_body(svs=[""] * 12, pdop="", hdop="", vdop=""))
    assert msg.sv_ids == []
    assert (msg.pdop, msg.hdop, msg.vdop) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("length", [18, 20])
def test_wrong_length_is_rejected(length):
    body = (make_body() + ["x"])[:length]
    with pytest.raises(ParseError, match="length is 19"):
        GsaParser().parse(body)


@pytest.mark.parametrize("fix_mode", ["x", "256", "-1"])
def test_bad_fix_mode(fix_mode):
    with pytest.raises(ParseError, match="fix_mode"):
        GsaParser().parse(make_body(fix_mode=fix_mode))


def test_bad_sv_id():
    svs = ["300"] + [""] * 11
    with pytest.raises(ParseError, match="sv_ids"):
        GsaParser().parse(make_body(svs=svs))


@pytest.mark.parametrize(
    "kwargs, name",
    [({"pdop": "abc"}, "pdop"), ({"hdop": "1,3"}, "hdop"), ({"vdop": "x"}, "vdop")],
)
def test_bad_dop(kwargs, name):
    with pytest.raises(ParseError, match=name):
        GsaParser().parse(make_body(**kwargs))


@given(
    st.lists(
        st.one_of(st.none(), st.integers(min_value=0, max_value=255)),
        min_size=12,
        max_size=12,
    )
)
def test_sv_ids_keep_order_and_skip_blanks(slots):
    svs = ["" if sv is None else str(sv) for sv in slots]
    msg = GsaParser().parse(make_body(svs=svs))
    assert msg.sv_ids == [sv for sv in slots if sv is not None]