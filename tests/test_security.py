import pytest

from uniformfeed import ParseError, parse_feed
from uniformfeed.wire import parse_xml

BILLION_LAUGHS = b"""<?xml version="1.0"?>
<!DOCTYPE rss [
  <!ENTITY lol "lol">
  <!ENTITY lol1 "&lol;&lol;&lol;&lol;&lol;&lol;&lol;&lol;&lol;&lol;">
  <!ENTITY lol2 "&lol1;&lol1;&lol1;&lol1;&lol1;&lol1;&lol1;&lol1;&lol1;&lol1;">
  <!ENTITY lol3 "&lol2;&lol2;&lol2;&lol2;&lol2;&lol2;&lol2;&lol2;&lol2;&lol2;">
  <!ENTITY lol4 "&lol3;&lol3;&lol3;&lol3;&lol3;&lol3;&lol3;&lol3;&lol3;&lol3;">
  <!ENTITY lol5 "&lol4;&lol4;&lol4;&lol4;&lol4;&lol4;&lol4;&lol4;&lol4;&lol4;">
  <!ENTITY lol6 "&lol5;&lol5;&lol5;&lol5;&lol5;&lol5;&lol5;&lol5;&lol5;&lol5;">
  <!ENTITY lol7 "&lol6;&lol6;&lol6;&lol6;&lol6;&lol6;&lol6;&lol6;&lol6;&lol6;">
  <!ENTITY lol8 "&lol7;&lol7;&lol7;&lol7;&lol7;&lol7;&lol7;&lol7;&lol7;&lol7;">
  <!ENTITY lol9 "&lol8;&lol8;&lol8;&lol8;&lol8;&lol8;&lol8;&lol8;&lol8;&lol8;">
]>
<rss version="2.0"><channel><title>&lol9;</title></channel></rss>
"""

EXTERNAL_ENTITY = b"""<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE rss [<!ENTITY xxe SYSTEM "file:///etc/passwd">]>
<rss version="2.0"><channel><title>&xxe;</title></channel></rss>
"""


def test_entity_expansion_bomb_is_rejected():
    with pytest.raises(ParseError, match="DOCTYPE"):
        parse_feed(BILLION_LAUGHS)


def test_external_entity_is_rejected():
    with pytest.raises(ParseError, match="DOCTYPE"):
        parse_feed(EXTERNAL_ENTITY)


def test_doctype_after_comment_is_rejected():
    xml = (
        "<?xml version='1.0'?>\n<!-- generated -->\n"
        '<!DOCTYPE rss PUBLIC "-//Netscape Communications//DTD RSS 0.91//EN" '
        '"http://my.netscape.com/publish/formats/rss-0.91.dtd">\n'
        "<rss version='0.91'><channel><title>t</title></channel></rss>"
    )
    with pytest.raises(ParseError, match="DOCTYPE"):
        parse_xml(xml)


def test_doctype_without_xml_declaration_is_rejected():
    with pytest.raises(ParseError):
        parse_xml('<!DOCTYPE feed [<!ENTITY a "b">]><feed>&a;</feed>')


def test_doctype_behind_leading_junk_is_rejected():
    xml = 'junk\n<!DOCTYPE rss [<!ENTITY xxe SYSTEM "file:///etc/passwd">]><rss>&xxe;</rss>'
    with pytest.raises(ParseError):
        parse_xml(xml)


def test_plain_document_parses():
    root = parse_xml("<?xml version='1.0' encoding='iso-8859-1'?><rss><channel/></rss>")
    assert root.tag == "rss"
