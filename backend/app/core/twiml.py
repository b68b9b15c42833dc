from xml.etree.ElementTree import Element, SubElement, tostring


def _render(element: Element) -> str:
    return tostring(element, encoding="unicode")


def say_and_hangup(message: str) -> str:
    response = Element("Response")
    say = SubElement(response, "Say")
    say.text = message
    SubElement(response, "Hangup")
    return _render(response)


def dial_number(target_number: str, caller_id: str | None = None) -> str:
    response = Element("Response")
    dial = SubElement(response, "Dial")
    if caller_id:
        dial.set("callerId", caller_id)
    number = SubElement(dial, "Number")
    number.text = target_number
    return _render(response)
