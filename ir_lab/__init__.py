"""IR Lab - scoring core and API for the information-retrieval visualizers"""
