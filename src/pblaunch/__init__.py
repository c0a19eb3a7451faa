"""pblaunch - run a prebuilt PocketBase binary as a supervised child process."""

__version__ = "0.1.0"
