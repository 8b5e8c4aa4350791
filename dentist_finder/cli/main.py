import httpx
import requests
import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from dentist_finder.config import load_settings, setup_logging
from dentist_finder.config.settings import DentistFinderSettings
from dentist_finder.exceptions import DentistFinderError, ListingParseError
from dentist_finder.providers.google import GoogleGeocodingClient
from dentist_finder.providers.hospital_aleman import HospitalAlemanListingClient
from dentist_finder.services.report_service import DentistReportService, print_report
from dentist_finder.utils.async_utils import run_async_safe

app = typer.Typer(
    help="Lists in-network dentists sorted by distance from MY_ADDRESS",
    add_completion=False,
)
# stdout only carries the report
console = Console(stderr=True)


async def _build_report(settings: DentistFinderSettings):
    listing_client = HospitalAlemanListingClient(
        settings.listing_url,
        settings.cookie,
        timeout=settings.http_timeout,
    )
    async with GoogleGeocodingClient(
        settings.google_api_key,
        geocode_url=settings.geocode_url,
        timeout=settings.http_timeout,
    ) as geocoder:
        service = DentistReportService(listing_client, geocoder, settings.my_address)
        return await service.build_report()


def _describe(error: Exception) -> str:
    # The geocoding URL carries the API key in its query string
    if isinstance(error, httpx.HTTPStatusError):
        url = error.request.url
        return f"HTTP {error.response.status_code} from {url.scheme}://{url.host}{url.path}"
    return str(error)


def _fail(error: Exception):
    console.print(f"[bold red]Error:[/] {escape(_describe(error))}", soft_wrap=True)
    raise typer.Exit(code=1)


@app.command()
def report():
    """
    Fetch the dentist listing, geocode it and print it nearest-first.

    Reads GOOGLE_API_KEY, COOKIE and MY_ADDRESS from the environment or .env.
    """
    try:
        settings = load_settings()
    except DentistFinderError as e:
        _fail(e)

    setup_logging(level_override=settings.log_level)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("Fetching and geocoding dentists...", total=None)
            providers = run_async_safe(_build_report(settings))
    except ListingParseError as e:
        typer.echo(e.html, err=True)
        _fail(e)
    except (DentistFinderError, requests.RequestException, httpx.HTTPError) as e:
        _fail(e)

    print_report(providers)


if __name__ == "__main__":
    app()
