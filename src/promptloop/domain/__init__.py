"""Pure domain logic: conversion, validation, and rejection reasons."""
