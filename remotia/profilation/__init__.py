"""Processors for timing, dropping, logging, CSV output and dumping frames."""