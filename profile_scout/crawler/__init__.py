"""profile_scout.crawler: fetching, pagination, extraction and the crawl orchestrator."""
