"""
HTML pages for the landing route.

Three pages: platform home, not-found, and the parked / for-sale page.
All dynamic values are HTML-escaped; the offer form posts JSON to
/api/v1/offers from a small inline script.
"""
from decimal import Decimal
from html import escape
from typing import Iterable, Optional

from parking.core.landing import background_for
from parking.db.models import ContentType, DailyContent, Domain

FALLBACK_CONTENT = "Faith is the substance of things hoped for..."

BASE_STYLE = """
    body {
        margin: 0;
        min-height: 100vh;
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Arial, sans-serif;
        color: #fff;
        background-color: #111827;
        display: flex;
        flex-direction: column;
        align-items: center;
        justify-content: center;
        text-align: center;
    }
    main {
        max-width: 900px;
        padding: 40px 24px 96px;
    }
    footer {
        position: fixed;
        bottom: 0;
        width: 100%;
        padding: 12px 0;
        background: rgba(17, 24, 39, 0.8);
        font-size: 14px;
    }
    a { color: #bfdbfe; }
"""


def format_price(amount: Optional[Decimal]) -> str:
    """$1,234.00 style; empty string for None"""
    if amount is None:
        return ""
    return f"${amount:,.2f}"


def _page(title: str, body: str, extra_style: str = "", body_style: str = "") -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1">
        <title>{escape(title)}</title>
        <style>{BASE_STYLE}{extra_style}</style>
    </head>
    <body style="{body_style}">
{body}
    </body>
</html>
"""


def _footer(platform_name: str) -> str:
    return f"""
        <footer>Powered by {escape(platform_name)} &bull; The Christian Domain Network</footer>"""


def render_content(content: Optional[DailyContent]) -> str:
    """Banner with link, verse/quote with optional reference, or the fallback line."""
    if content is None:
        return f'<p class="fallback"><em>"{escape(FALLBACK_CONTENT)}"</em></p>'

    if content.content_type == ContentType.BANNER and content.target_url:
        return f"""<a class="banner" href="{escape(content.target_url)}" target="_blank" rel="noopener noreferrer">
                <h2>{escape(content.body)}</h2>
                <p>Learn More</p>
            </a>"""

    reference = ""
    if content.reference:
        reference = f'<p class="reference">&mdash; {escape(content.reference)}</p>'
    return f"""<blockquote>"{escape(content.body)}"</blockquote>
            {reference}"""


def _offer_section(domain: Domain) -> str:
    price_html = ""
    if domain.list_price is not None:
        price_html = f"""<p>Asking Price:</p>
                    <p class="price">{escape(format_price(domain.list_price))}</p>"""

    placeholder = f"Asking: {format_price(domain.list_price)}" if domain.list_price is not None else "Enter amount"

    return f"""
            <details class="sale">
                <summary>Available for Purchase</summary>
                <div class="sale-panel">
                    {price_html}
                    <form id="offer-form" data-domain-id="{domain.id}">
                        <h3>Make an offer for {escape(domain.name)}</h3>
                        <input type="email" name="buyer_email" placeholder="Your Email" required>
                        <input type="number" name="offer_amount" min="0" step="0.01" placeholder="{escape(placeholder)}">
                        <textarea name="message" rows="3" placeholder="Message (Optional)"></textarea>
                        <button type="submit">Send Offer</button>
                        <p id="offer-status" role="status"></p>
                    </form>
                </div>
            </details>
            <script>
            document.getElementById("offer-form").addEventListener("submit", async function (event) {{
                event.preventDefault();
                const form = event.target;
                const status = document.getElementById("offer-status");
                const amount = form.offer_amount.value;
                status.textContent = "Sending...";
                const response = await fetch("/api/v1/offers", {{
                    method: "POST",
                    headers: {{"Content-Type": "application/json"}},
                    body: JSON.stringify({{
                        domain_id: Number(form.dataset.domainId),
                        buyer_email: form.buyer_email.value,
                        offer_amount: amount ? Number(amount) : null,
                        message: form.message.value
                    }})
                }});
                if (response.ok) {{
                    form.reset();
                    status.textContent = "Offer Sent! The owner has been notified and will contact you directly.";
                }} else {{
                    status.textContent = "Something went wrong. Please try again.";
                }}
            }});
            </script>"""


def render_domain_page(domain: Domain, content: Optional[DailyContent], platform_name: str) -> str:
    """Parked page; adds the price and offer form when the domain is for sale."""
    if domain.is_for_sale:
        status_html = _offer_section(domain)
    else:
        status_html = f'<p class="hosted"><em>This domain is securely hosted by {escape(platform_name)}.</em></p>'

    background = background_for(domain.name)
    body = f"""        <main>
            <section class="inspiration">
            {render_content(content)}
            </section>
            <h1>{escape(domain.name)}</h1>
            {status_html}
        </main>{_footer(platform_name)}"""

    extra_style = """
    body::before {
        content: "";
        position: fixed;
        inset: 0;
        background: rgba(0, 0, 0, 0.4);
        z-index: -1;
    }
    blockquote { font-family: Georgia, serif; font-size: 2.5em; font-style: italic; margin: 0; }
    .reference { font-size: 1.4em; text-transform: uppercase; letter-spacing: 0.1em; opacity: 0.8; }
    .banner { display: block; padding: 24px; border-radius: 12px; background: rgba(255,255,255,0.1); text-decoration: none; color: #fff; }
    h1 { margin-top: 64px; letter-spacing: 0.2em; text-transform: uppercase; }
    .price { font-size: 3em; font-weight: 900; color: #4ade80; margin: 0; }
    .sale-panel { margin-top: 16px; padding: 24px; border-radius: 16px; background: rgba(0,0,0,0.4); }
    form input, form textarea { display: block; width: 100%; margin: 8px 0; padding: 8px; box-sizing: border-box; }
    summary { cursor: pointer; font-weight: 600; text-transform: uppercase; }
"""
    body_style = f"background: #111827 url('{escape(background)}') center / cover no-repeat fixed;"
    return _page(f"{domain.name} - Parked", body, extra_style=extra_style, body_style=body_style)


def render_platform_home(platform_name: str, featured: Iterable[Domain]) -> str:
    """Marketing page for the platform root hosts."""
    items = "".join(
        f'<li><a href="//{escape(d.name)}">{escape(d.name)}</a> '
        f'<span>{"For Sale" if d.is_for_sale else "Parked"}</span></li>'
        for d in featured
    )
    showcase = ""
    if items:
        showcase = f"""
            <section class="showcase">
                <p>Recently Parked Domains</p>
                <ul>{items}</ul>
            </section>"""

    body = f"""        <main>
            <h1>Park your domains with purpose</h1>
            <p>Most domain parking pages are cluttered with spam and ads.
            We turn your unused digital real estate into a source of daily inspiration
            while helping you find the right buyer securely.</p>{showcase}
        </main>{_footer(platform_name)}"""

    extra_style = """
    .showcase ul { list-style: none; padding: 0; }
    .showcase li { margin: 6px 0; }
    .showcase span { opacity: 0.7; font-size: 0.9em; }
"""
    return _page(f"{platform_name} - Domain Parking", body, extra_style=extra_style)


def render_not_found(host: str, platform_name: str) -> str:
    """404 page for unknown hosts and hidden domains."""
    subject = escape(host) if host else "This domain"
    body = f"""        <main>
            <h1>404</h1>
            <p>{subject} is not parked here.</p>
        </main>{_footer(platform_name)}"""
    return _page("Domain not found", body)
