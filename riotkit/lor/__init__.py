"""Legends of Runeterra API data models."""