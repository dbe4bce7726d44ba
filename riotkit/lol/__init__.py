"""League of Legends API data models."""