# crawlkit

A polite web crawler. It starts from a seed URL, fetches pages with a pool of
worker threads and follows the links it finds. It honours `robots.txt`, limits
its request rate per host, extracts each page's title and readable text, and
can store the results in MongoDB.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running a crawl

```
crawlkit --seed https://example.com/ --maxPages 200 --workers 8 --strategy bfs
```

Every option may be written with one or two leading dashes (`-seed` or
`--seed`).

| Option            | Default                  | Meaning                                              |
|-------------------|--------------------------|------------------------------------------------------|
| `--seed`          | `https://example.com/`   | initial URL to start crawling from                   |
| `--maxPages`      | `5000`                   | stop after N pages                                   |
| `--workers`       | `32`                     | number of parallel fetchers                          |
| `--strategy`      | `bfs`                    | `bfs`, `dfs` or `mixedN` (N% of pops go depth-first) |
| `--maxPerHost`    | `2.0`                    | max requests per second to one host                  |
| `--userAgent`     | `crawlkit/0.2`           | user agent matched against `robots.txt` rules        |
| `--robotsTimeout` | `5`                      | robots.txt download timeout in whole seconds         |
| `--tokens`        | `5000`                   | max number of tokens to parse in HTML content        |

The command exits with status 1 if the database cannot be reached, and 0
otherwise. Once a minute it prints how many pages have been crawled and how
many URLs are queued; at the end it prints the final counts.

### Strategies

- `bfs` takes URLs from the front of the frontier (breadth-first).
- `dfs` takes URLs from the back (depth-first).
- `mixedN`, for example `mixed30`, takes from the back with probability N% and
  from the front otherwise. N is clamped to 0–100.
- Any other value, or a malformed N, behaves like `bfs`.

### How pages are handled

- Each host's `robots.txt` is fetched once; if it is missing, returns an error
  status or cannot be reached, every path on that host is allowed.
- Each host gets a token-bucket limiter at `--maxPerHost` requests per second,
  with a burst equal to that value truncated to a whole number. A value below 1
  therefore leaves no burst, and URLs for such hosts are skipped.
- Pages are fetched with a 15-second timeout, and at most 1 MiB of each body
  is read.
- Links with the `mailto`, `javascript`, `tel` or `data` schemes, or any scheme
  other than `http` and `https`, are ignored. Fragments are dropped, and an
  empty path becomes `/`.

## Storage

Set `MONGODB_URI` in the environment or in a `.env` file to store every
crawled page in the `webpages` collection of the `webCrawlerArchive` database.
The collection is cleared when a crawl starts, so a crawl cannot be resumed.
Without `MONGODB_URI` the crawler runs without storage and prints a notice for
each page it skips.

Each stored document has the fields `url`, `title`, `content` and `wordCount`.

## Metrics

While a crawl runs, counters are served in Prometheus text format at
`http://localhost:2112/metrics`:

- `crawler_pages_fetched_total`
- `crawler_bytes_fetched_total`

If the port cannot be opened, the crawl goes on without the endpoint. Setting
`Options.metrics_port` to `None` turns the endpoint off.

## Library use

```python
from crawlkit.links import resolve_link
from crawlkit.htmlparse import extract, parse_html

resolve_link("https://example.com/a/b", "../c#top")   # 'https://example.com/c'

title, text, words = extract(b"<title>Hi</title><p>Hello world</p>", 100)
# ('Hi', 'Hello world', 2)

page, links = parse_html("https://example.com/", b'<a href="/x">x</a>', 100)
# links == ['https://example.com/x']
```

A crawl can also be started from code. `run` returns a `CrawlStats` with the
`crawled` and `queued` counts, and raises `CrawlError` if the database cannot
be reached:

```python
from crawlkit.options import Options
from crawlkit.engine import run

stats = run(Options(seeds=["https://example.com/"], max_pages=50, workers=4))
print(stats.crawled, stats.queued)
```

Other building blocks:

- `crawlkit.frontier`: `Queue` (a thread-safe double-ended URL queue) and
  `Visited` (a set of URLs kept as 64-bit FNV-1a hashes, see `fnv1a_64`).
- `crawlkit.hostman`: `HostManager`, `RateLimiter` and `fetch_robots`.
- `crawlkit.storage`: `Webpage` and `Store`.
- `crawlkit.metrics`: `Counter`, `render` and `start_metrics_server`.

## What it does not do

The crawler does not render JavaScript, does not keep state between runs, and
does not deduplicate pages by content; only URLs are tracked as visited.