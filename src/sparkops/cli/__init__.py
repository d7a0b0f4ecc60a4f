"""SparkOps command line interface."""
