"""General-purpose frame processors: containers, pacing and routing switches."""