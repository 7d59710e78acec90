"""HTTP routers for the dashboard API and the landing route"""
