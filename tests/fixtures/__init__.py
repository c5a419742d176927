# Test data and fixtures


VALID_LATEX = r"""\documentclass{article}
\begin{document}
Hello, world!
\end{document}
"""

# Undefined control sequence; the fake compiler rejects it like tectonic does
INVALID_LATEX = r"""\documentclass{article}
\begin{document}
\undefinedmacro
\end{document}
"""

FAKE_PDF_HEADER = b"%PDF-1.5\n"

SIGNED_URL_TEMPLATE = (
    "https://latex-box.test-account.r2.cloudflarestorage.com/{key}"
    "?X-Amz-Algorithm=AWS4-HMAC-SHA256&X-Amz-Expires=3600&X-Amz-Signature=deadbeef"
)
