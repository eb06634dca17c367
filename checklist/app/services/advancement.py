"""
Advancement and outreach text.

Builds the strings the checklist hands to the clipboard, the mail client or
the SMS app: the per-night advancement summary, its mailto link, the group
text URI for a bucket's artists and the social media table pasted into
promo emails. Nothing here sends anything.
"""

import html
from typing import Iterable, List, Optional
from urllib.parse import quote

from checklist.app.services.grouping import Record, display_month_room, name_key
from checklist.app.services.set_times import build_set_list

RULE = "-" * 53


def build_advancement_details(
    month: str,
    room: str,
    artists: Iterable[Record],
    guests: Iterable[Record],
    closing_time: Optional[str] = None,
) -> str:
    """
    Advancement summary for one month/room.

    `artists` and `guests` should already be limited to the bucket
    (see grouping.records_in_room). Sections: artists, guest list, set times.
    """
    artists = list(artists)
    heading = display_month_room(month, room)

    lines = [f"ADVANCEMENT DETAILS FOR {month.upper()}", ""]

    lines += [f"ARTISTS ({heading}):", RULE, "Name / Stage Name / Contact", RULE]
    if artists:
        for artist in sorted(artists, key=lambda a: name_key(a.get("name"))):
            lines.append(f"{artist.get('name') or 'N/A'} / {artist.get('stage_name') or ''} / {artist.get('phone') or ''}")
    else:
        lines.append(f"No artists found for {heading}.")
    lines += ["", ""]

    lines += [f"GUEST LIST ({heading}):", RULE, "Name / Contact", RULE]
    sorted_guests = sorted(guests, key=lambda g: name_key(g.get("name")))
    if sorted_guests:
        for guest in sorted_guests:
            lines.append(f"{guest.get('name') or 'N/A'} / {guest.get('contact') or ''}")
    else:
        lines.append(f"No guests found for {heading}.")
    lines += ["", ""]

    lines += [f"SET TIMES ({heading}):", RULE]
    set_list = build_set_list(artists, closing_time)
    if set_list:
        lines += set_list
    else:
        lines.append(f"No set times available for {heading}.")

    return "\n".join(lines) + ("" if set_list else "\n")


def advancement_subject(month: str, room: str) -> str:
    return f"{display_month_room(month, room)} Advancement Details"


def compose_mailto_link(recipient: str, subject: str, body: str) -> str:
    return f"mailto:{recipient}?subject={quote(subject, safe='')}&body={quote(body, safe='')}"


def collect_phone_numbers(artists: Iterable[Record]) -> List[str]:
    return [a["phone"].strip() for a in artists if a.get("phone") and a["phone"].strip()]


def compose_sms_uri(artists: Iterable[Record]) -> Optional[str]:
    """Group text URI for the artists' phone numbers, None when nobody has one."""
    numbers = collect_phone_numbers(artists)
    if not numbers:
        return None
    return "sms:" + ", ".join(numbers)


def social_media_table_html(artists: Iterable[Record]) -> Optional[str]:
    """HTML table of artist names and social links for pasting into rich text email."""
    with_social = [a for a in artists if a.get("social_media") and a["social_media"].strip()]
    if not with_social:
        return None

    rows = []
    for artist in with_social:
        name = html.escape(artist.get("stage_name") or artist.get("name") or "N/A")
        link = html.escape(artist["social_media"].strip(), quote=True)
        rows.append(f'<tr>\n<td>{name}</td>\n<td><a href="{link}" target="_blank">{link}</a></td>\n</tr>\n')

    return (
        '<table border="1" style="border-collapse: collapse; width: 100%;">\n'
        "<thead>\n<tr>\n<th>Artist Name</th>\n<th>Social Media Link</th>\n</tr>\n</thead>\n"
        "<tbody>\n" + "".join(rows) + "</tbody>\n</table>"
    )
