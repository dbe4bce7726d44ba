"""Static game constants and a caching client to fetch them."""