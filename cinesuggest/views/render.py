"""
Presentation of the Request State.

``build_page_view`` is a pure function from a Request State snapshot to the
regions of the page; ``render_page`` turns that view into the HTML document
served at ``/``. All user and provider text is HTML-escaped.
"""

import html
from dataclasses import dataclass, field
from typing import List, Optional

from cinesuggest.schemas.recommendations import (
    FailedState,
    IdleState,
    LoadingState,
    MovieRecommendation,
    RequestState,
    SucceededState,
)

APP_TITLE = "CineSuggest AI"
TAGLINE = "Discover your next favorite movie from around the world."
INPUT_LABEL = "Tell me some movies you love..."
INPUT_PLACEHOLDER = "e.g., Parasite, The Dark Knight, Spirited Away, RRR"
SUBMIT_LABEL = "Get Recommendations"
LOADING_LABEL = "Finding Gems..."
RESULTS_HEADING = "Here are some movies you might enjoy:"
EMPTY_PLACEHOLDER = "Your personalized movie recommendations will appear here."


@dataclass(frozen=True)
class PageView:
    """What the page shows for one Request State."""
    is_loading: bool = False
    error: Optional[str] = None
    recommendations: List[MovieRecommendation] = field(default_factory=list)
    show_placeholder: bool = False

    @property
    def show_results(self) -> bool:
        return bool(self.recommendations)

    @property
    def submit_label(self) -> str:
        return LOADING_LABEL if self.is_loading else SUBMIT_LABEL


def build_page_view(state: RequestState) -> PageView:
    """Map a Request State to mutually exclusive page regions."""
    if isinstance(state, LoadingState):
        return PageView(is_loading=True)
    if isinstance(state, FailedState):
        return PageView(error=state.error)
    if isinstance(state, SucceededState):
        return PageView(recommendations=list(state.recommendations))
    if isinstance(state, IdleState):
        return PageView(show_placeholder=True)
    raise TypeError(f"Unknown request state: {state!r}")


def card_key(movie: MovieRecommendation, index: int) -> str:
    """Cards are told apart by position; titles may repeat."""
    return f"{movie.title}-{index}"


# =============================================================================
# HTML
# =============================================================================

_FILM_ICON = "&#127902;"
_ERROR_ICON = "&#9888;"

_STYLES = """
    * { box-sizing: border-box; }
    body { margin: 0; min-height: 100vh; background: #111827; color: #f3f4f6;
           font-family: system-ui, -apple-system, "Segoe UI", sans-serif; padding: 2rem 1rem; }
    .container { max-width: 56rem; margin: 0 auto; }
    header { text-align: center; margin-bottom: 2rem; }
    header h1 { font-size: 2.75rem; margin: 0 0 .5rem; color: #a5b4fc; }
    header p { color: #9ca3af; margin: 0; }
    label { display: block; font-size: 1.125rem; color: #d1d5db; margin-bottom: .5rem; }
    textarea { width: 100%; height: 8rem; padding: 1rem; resize: none; border-radius: .5rem;
               background: #1f2937; color: #e5e7eb; border: 2px solid #374151; font: inherit; }
    button { margin-top: 1rem; width: 100%; padding: .75rem 1.5rem; border: 0; border-radius: .5rem;
             background: #4f46e5; color: #fff; font-weight: 600; font-size: 1rem; cursor: pointer; }
    button:disabled { background: #312e81; color: #9ca3af; cursor: not-allowed; }
    .spinner { display: inline-block; width: 1rem; height: 1rem; margin-right: .5rem; vertical-align: -2px;
               border: 2px solid #9ca3af; border-top-color: transparent; border-radius: 50%;
               animation: spin 1s linear infinite; }
    @keyframes spin { to { transform: rotate(360deg); } }
    form { margin-bottom: 2.5rem; }
    .error { display: flex; gap: .75rem; align-items: center; padding: 1rem; border-radius: .5rem;
             background: rgba(127, 29, 29, .5); border: 1px solid #b91c1c; color: #fca5a5; }
    .results h2 { text-align: center; color: #e5e7eb; }
    .grid { display: grid; grid-template-columns: 1fr; gap: 1.5rem; }
    @media (min-width: 768px) { .grid { grid-template-columns: repeat(2, 1fr); } }
    @media (min-width: 1024px) { .grid { grid-template-columns: repeat(3, 1fr); } }
    .card { background: #1f2937; border: 1px solid #374151; border-radius: .75rem; padding: 1.25rem; }
    .card img { width: 100%; border-radius: .5rem; margin-bottom: .75rem; }
    .card h3 { margin: 0 0 .25rem; color: #c7d2fe; }
    .card .meta { color: #9ca3af; font-size: .875rem; margin: 0 0 .75rem; }
    .card .reason { color: #a5b4fc; font-style: italic; }
    .placeholder { text-align: center; color: #6b7280; padding: 2.5rem 0; }
    .placeholder .icon { font-size: 4rem; opacity: .3; }
"""

# Switches the form to its loading look on submit. The textarea is made
# read-only rather than disabled so its value is still posted.
_SUBMIT_SCRIPT = """
  document.getElementById("recommend-form").addEventListener("submit", function (event) {
    var button = document.getElementById("submit-button");
    if (button.disabled) { event.preventDefault(); return; }
    document.getElementById("movie-input").readOnly = true;
    button.disabled = true;
    button.innerHTML = '<span class="spinner"></span>LOADING_LABEL';
  });
""".replace("LOADING_LABEL", LOADING_LABEL)


def _escape(value) -> str:
    return html.escape(str(value), quote=True)


def _render_card(movie: MovieRecommendation, index: int) -> str:
    meta = " · ".join(_escape(v) for v in (movie.year, movie.country) if v)
    parts = [f'<article class="card" data-key="{_escape(card_key(movie, index))}">']
    if movie.poster_url:
        parts.append(f'<img src="{_escape(movie.poster_url)}" alt="{_escape(movie.title)} poster">')
    parts.append(f"<h3>{_escape(movie.title)}</h3>")
    if meta:
        parts.append(f'<p class="meta">{meta}</p>')
    if movie.genre:
        parts.append(f'<p class="genre">{_escape(movie.genre)}</p>')
    if movie.description:
        parts.append(f'<p class="description">{_escape(movie.description)}</p>')
    if movie.reason:
        parts.append(f'<p class="reason">{_escape(movie.reason)}</p>')
    parts.append("</article>")
    return "\n".join(parts)


def _render_results_section(view: PageView) -> str:
    sections = []
    if view.error is not None:
        sections.append(
            f'<div class="error" role="alert" id="error-banner">'
            f'<span>{_ERROR_ICON}</span><p>{_escape(view.error)}</p></div>'
        )
    if view.show_results:
        cards = "\n".join(
            _render_card(movie, index) for index, movie in enumerate(view.recommendations)
        )
        sections.append(
            f'<div class="results" id="results">\n<h2>{_escape(RESULTS_HEADING)}</h2>\n'
            f'<div class="grid">\n{cards}\n</div>\n</div>'
        )
    if view.show_placeholder:
        sections.append(
            f'<div class="placeholder" id="placeholder">'
            f'<div class="icon">{_FILM_ICON}</div>'
            f"<p>{_escape(EMPTY_PLACEHOLDER)}</p></div>"
        )
    return "\n".join(sections)


def render_page(view: PageView, user_input: str = "", max_length: Optional[int] = None) -> str:
    """Render the full single-page HTML document."""
    disabled = " disabled" if view.is_loading else ""
    textarea_attrs = disabled
    if max_length is not None:
        textarea_attrs = f' maxlength="{max_length}"' + disabled
    if view.is_loading:
        button_content = f'<span class="spinner"></span>{_escape(LOADING_LABEL)}'
    else:
        button_content = _escape(SUBMIT_LABEL)

    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{APP_TITLE}</title>
  <style>{_STYLES}</style>
</head>
<body>
<div class="container">
  <header>
    <h1>{_FILM_ICON} {APP_TITLE}</h1>
    <p>{_escape(TAGLINE)}</p>
  </header>
  <main>
    <form id="recommend-form" method="post" action="/">
      <label for="movie-input">{_escape(INPUT_LABEL)}</label>
      <textarea id="movie-input" name="movies" placeholder="{_escape(INPUT_PLACEHOLDER)}"{textarea_attrs}>{_escape(user_input)}</textarea>
      <button id="submit-button" type="submit"{disabled}>{button_content}</button>
    </form>
    <div class="results-section">
{_render_results_section(view)}
    </div>
  </main>
</div>
<script>{_SUBMIT_SCRIPT}</script>
</body>
</html>"""
