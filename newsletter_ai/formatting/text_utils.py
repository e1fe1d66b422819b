"""Text processing utilities."""
from bs4 import BeautifulSoup


def strip_html(html_content: str) -> str:
    """Convert HTML to plain text for the alternative email part."""
    if not html_content:
        return ""

    soup = BeautifulSoup(html_content, 'html.parser')

    # Remove script and style elements
    for script in soup(["script", "style"]):
        script.decompose()

    # Links keep their target next to the text
    for anchor in soup.find_all('a'):
        href = anchor.get('href')
        if href and href != '#':
            anchor.append(f" ({href})")

    text = soup.get_text()
    lines = (line.strip() for line in text.splitlines())
    chunks = (phrase.strip() for line in lines for phrase in line.split("  "))

    return '\n'.join(chunk for chunk in chunks if chunk)
