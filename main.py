# main.py — 2026-10-18
import click

import crawler
import report
import utils
from automaton import PatternAutomaton

@click.group()
def cli() -> None:
    """Crawl a site and rank its pages by how often given terms appear."""
    pass

@cli.command()
@click.argument("seed_url")
@click.option("-t", "--terms", prompt="Enter terms comma separated",
              help="Comma separated terms (case-insensitive).")
@click.option("--depth", default=crawler.DEFAULT_LINK_DEPTH, show_default=True,
              help="Link depth to follow from the seed page.")
@click.option("--pages", default=crawler.DEFAULT_MAX_VISITED_PAGES_LIMIT, show_default=True,
              help="Max pages to analyse.")
@click.option("--top", default=utils.DEFAULT_TOP_PAGES, show_default=True,
              help="How many top pages to print and export.")
@click.option("--all-csv", default="all_stats.csv", show_default=True,
              type=click.Path(dir_okay=False), help="CSV with every crawled page.")
@click.option("--top-csv", default="top_10_pages_stats.csv", show_default=True,
              type=click.Path(dir_okay=False), help="CSV with the top pages.")
@click.option("-v", "--verbose", is_flag=True, help="Print every fetched URL.")
def crawl(seed_url: str, terms: str, depth: int, pages: int, top: int,
          all_csv: str, top_csv: str, verbose: bool) -> None:
    """Crawl from SEED_URL and count the terms on every page."""
    wc = crawler.WebCrawler(seed_url, utils.parse_terms(terms), depth, pages,
                            verbose=verbose)
    click.echo(f"Crawling {seed_url} …")
    wc.calculate_stats()

    try:
        report.write_stats_csv(all_csv, wc.terms, wc.pages_stats)
        report.write_top_pages_csv(top_csv, wc.terms, wc.pages_stats, top)
    except OSError as exc:
        raise click.ClickException(f"could not write CSV: {exc}") from exc

    click.echo(click.style(f"✓ Analysed {len(wc.pages_stats)} pages.", fg="green"))
    click.echo(f"Top {top} pages by total hits")
    click.echo(utils.format_stats_table(wc.terms, wc.top_pages(top)))

@cli.command()
@click.argument("text")
@click.option("-t", "--terms", required=True, help="Comma separated terms.")
def count(text: str, terms: str) -> None:
    """Count the terms in TEXT without crawling anything."""
    trie = PatternAutomaton(t.lower() for t in utils.parse_terms(terms))
    for term, n in trie.count_occurrences(text.lower()).items():
        click.echo(f"{term}: {n}")

if __name__ == "__main__":
    cli()
