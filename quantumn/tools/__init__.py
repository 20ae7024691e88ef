"""File reading and writing, regex search, file finding and external commands."""