"""Receiver settings, navigation records and storage connectors."""