"""Compare uniformfeed against feedparser on live feeds.

Usage: python benchmark.py [FEED_URL ...]
"""

import sys
import time

import feedparser
import httpx

from uniformfeed import FeedError, parse_feed

DEFAULT_FEEDS = [
    "https://www.python.org/blogs/rss/",
    "https://blog.python.org/feeds/posts/default",
    "https://xkcd.com/atom.xml",
    "https://xkcd.com/rss.xml",
    "https://planetpython.org/rss20.xml",
]

headers = {
    "User-Agent": "uniformfeed-benchmark",
    "Accept": "application/rss+xml, application/atom+xml, application/xml, */*",
    "Connection": "close",
}

client = httpx.Client(follow_redirects=True, headers=headers, timeout=20.0)


def time_uniformfeed(content):
    start_time = time.perf_counter()
    try:
        feed = parse_feed(content)
    except FeedError as e:
        print(f"uniformfeed failed: {e}")
        return 0.0
    elapsed = time.perf_counter() - start_time
    print(f"uniformfeed: {len(feed.entries)} entries ({feed.feed_type}) in {elapsed:.4f}s")
    return elapsed


def time_feedparser(content):
    start_time = time.perf_counter()
    feed = feedparser.parse(content)
    elapsed = time.perf_counter() - start_time
    if feed.bozo and not feed.entries:
        print(f"feedparser failed: {feed.bozo_exception}")
        return 0.0
    print(f"feedparser: {len(feed.entries)} entries in {elapsed:.4f}s")
    return elapsed


def run(urls):
    total_uf_time = 0.0
    total_fp_time = 0.0
    compared = 0

    for url in urls:
        print(f"\n{url}")
        try:
            resp = client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            print(f"Failed to fetch feed: {e}")
            continue

        uf_time = time_uniformfeed(resp.content)
        fp_time = time_feedparser(resp.content)
        if uf_time and fp_time:
            total_uf_time += uf_time
            total_fp_time += fp_time
            compared += 1

    print("\n" + "-" * 50)
    print(f"Compared {compared} of {len(urls)} feeds")
    if compared:
        print(f"Average uniformfeed time: {total_uf_time / compared:.4f}s")
        print(f"Average feedparser time: {total_fp_time / compared:.4f}s")
        print(f"uniformfeed is {total_fp_time / total_uf_time:.1f}x faster")


if __name__ == "__main__":
    run(sys.argv[1:] or DEFAULT_FEEDS)
