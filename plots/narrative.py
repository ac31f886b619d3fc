import html
from pathlib import Path

import pandas as pd
from plotly.offline import get_plotlyjs_version


def figure_html(fig) -> str:
    return fig.to_html(full_html=False, include_plotlyjs=False)


def table_html(df: pd.DataFrame) -> str:
    return df.to_html(index=False, classes="data-table", border=0, na_rep="n/a")


def image_html(path, alt: str = "") -> str:
    return f'<img src="{html.escape(str(path))}" alt="{html.escape(alt)}">'


def map_html(m) -> str:
    return m._repr_html_()


def section(heading: str, prose: str, body: str = "") -> str:
    paragraphs = "\n".join(
        f"<p>{html.escape(p.strip())}</p>" for p in prose.split("\n\n") if p.strip()
    )
    return f"""
<section>
  <h2>{html.escape(heading)}</h2>
  {paragraphs}
  {body}
</section>"""


def render_report(title: str, sections: list[str], output_path) -> Path:
    output_path = Path(output_path)
    body = "".join(sections)
    page = f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{html.escape(title)}</title>
<script src="https://cdn.plot.ly/plotly-{get_plotlyjs_version()}.min.js"></script>
<style>
  body {{ font-family: Helvetica, Arial, sans-serif; max-width: 960px; margin: 2em auto; color: #222; }}
  h1 {{ border-bottom: 2px solid #3c78d8; padding-bottom: 0.3em; }}
  section {{ margin-bottom: 3em; }}
  img {{ max-width: 100%; }}
  .data-table {{ border-collapse: collapse; width: 100%; }}
  .data-table th, .data-table td {{ padding: 4px 8px; border-bottom: 1px solid #ddd; text-align: left; }}
</style>
</head>
<body>
<h1>{html.escape(title)}</h1>
{body}
</body>
</html>"""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(page, encoding="utf-8")
    print(f"Saved: {output_path}")
    return output_path
