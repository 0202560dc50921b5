"""Stylesheets for the semantic markup produced by ``cv_craft.rendering``.

Every themeable value reads a CSS custom property with a literal fallback,
so these rules render sensibly even when a variable is missing.
"""


def base_css() -> str:
    """Reset plus document-level typography and links."""
    return """
/* Base reset and document */
* {
  margin: 0;
  padding: 0;
  box-sizing: border-box;
}

html, body {
  width: 210mm;
  font-family: var(--font-family, 'IBM Plex Sans'), -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
  font-size: var(--body-font-size, 16px);
  color: var(--text-color, #0f172a);
  line-height: var(--body-line-height, 1.5);
  -webkit-print-color-adjust: exact !important;
  print-color-adjust: exact !important;
}

h1, h2, h3, h4, h5, h6 {
  font-family: var(--heading-font-family, 'Crimson Text'), Georgia, serif;
  line-height: var(--heading-line-height, 1.2);
  font-weight: var(--heading-weight, 700);
  page-break-after: avoid;
  break-after: avoid;
}

a {
  color: var(--link-color, #2563eb);
  font-weight: var(--link-font-weight, 500);
  text-decoration: underline;
}

a:hover {
  color: var(--link-hover-color, #1d4ed8);
}
"""


def photo_css() -> str:
    """Profile photo and its placeholder."""
    return """
/* Profile photo */
.photo-container {
  display: flex;
  justify-content: var(--profile-photo-position, center);
  margin-bottom: var(--profile-photo-margin-bottom, 16px);
}

.profile-photo {
  width: var(--profile-photo-size, 160px);
  height: var(--profile-photo-size, 160px);
  border-radius: var(--profile-photo-border-radius, 50%);
  border: var(--profile-photo-border, none);
  box-shadow: var(--profile-photo-shadow, none);
  filter: var(--profile-photo-filter, none);
  opacity: var(--profile-photo-opacity, 1);
  object-fit: cover;
  display: block;
}

.profile-photo-placeholder {
  width: var(--profile-photo-size, 160px);
  height: var(--profile-photo-size, 160px);
  border-radius: var(--profile-photo-border-radius, 50%);
  background-color: var(--muted-color, #e5e5e5);
  display: flex;
  align-items: center;
  justify-content: center;
  font-size: var(--tiny-font-size, 12px);
  color: var(--on-muted-color, #888888);
}
"""


def contact_css() -> str:
    """Contact block in vertical (sidebar) and horizontal (header) layouts."""
    return """
/* Contact information */
.contact-info {
  margin-bottom: 20px;
  display: flex;
  flex-direction: column;
  gap: var(--contact-spacing, 8px);
}

.contact-info.horizontal {
  flex-direction: row;
  flex-wrap: wrap;
  justify-content: center;
}

.contact-item {
  display: flex;
  align-items: center;
  gap: var(--contact-spacing, 8px);
  font-size: var(--contact-font-size, var(--small-font-size, 14px));
  color: var(--on-secondary-color, #4a3d2a);
}

.contact-item svg {
  flex-shrink: 0;
  width: var(--contact-icon-size, 14px);
  height: var(--contact-icon-size, 14px);
  color: var(--contact-icon-color, var(--on-secondary-color, #4a3d2a));
}

.contact-item a {
  color: inherit;
  text-decoration: none;
}

.contact-item a:hover {
  text-decoration: underline;
}

.break-all {
  word-break: break-all;
}
"""


def name_header_css() -> str:
    """Name heading and job title at the top of the main column."""
    return """
/* Name and job title */
.main-content > h1 {
  font-family: var(--heading-font-family, Georgia), serif;
  font-size: var(--name-font-size, 32px);
  font-weight: var(--name-font-weight, 700);
  font-style: var(--name-font-style, normal);
  color: var(--name-color, var(--primary-color, #2563eb));
  letter-spacing: var(--name-letter-spacing, 0);
  text-transform: var(--name-text-transform, none);
  text-align: var(--name-alignment, left);
  line-height: var(--name-line-height, 1.2);
  margin-top: var(--name-margin-top, 0);
  margin-bottom: var(--name-margin-bottom, 0.25rem);
  padding: var(--name-padding, 0);
  box-shadow: var(--name-shadow, none);
}

.job-title,
.main-content > p.job-title {
  font-size: var(--h3-font-size, 20px);
  color: var(--accent-color, #f59e0b);
  margin-bottom: 1rem;
}
"""


def semantic_css() -> str:
    """Sections, entries, skills and sidebar overrides."""
    return """
/* Sections */
.cv-section {
  margin-bottom: var(--section-spacing, 1.5rem);
}

.section-header {
  font-family: var(--heading-font-family, Georgia), serif;
  font-size: var(--section-header-font-size, 24px);
  font-weight: var(--section-header-font-weight, 700);
  font-style: var(--section-header-font-style, normal);
  color: var(--section-header-color, var(--primary-color, #2563eb));
  text-transform: var(--section-header-text-transform, uppercase);
  letter-spacing: var(--section-header-letter-spacing, 0.05em);
  line-height: var(--section-header-line-height, 1.2);
  border-bottom: var(--section-header-border-bottom, 2px solid);
  border-color: var(--section-header-border-color, var(--primary-color, #2563eb));
  padding: var(--section-header-padding, 4px 12px);
  margin-top: var(--section-header-margin-top, 24px);
  margin-bottom: var(--section-header-margin-bottom, 12px);
  box-shadow: var(--section-header-shadow, none);
}

.section-content {
  font-size: var(--body-font-size, 16px);
  color: var(--text-color, #0f172a);
  line-height: var(--body-line-height, 1.6);
}

/* Entries */
.entry {
  margin-bottom: 1rem;
}

.entry-description-last {
  margin-bottom: 0.5rem;
}

.entry-header {
  display: flex;
  justify-content: space-between;
  align-items: flex-start;
  flex-wrap: wrap;
  gap: 0.5rem;
  margin-bottom: 0.25rem;
}

.entry-title {
  font-family: var(--heading-font-family, Georgia), serif;
  font-size: var(--job-title-font-size, 20px);
  font-weight: var(--job-title-font-weight, 600);
  font-style: var(--job-title-font-style, normal);
  color: var(--job-title-color, var(--text-color, #0f172a));
  letter-spacing: var(--job-title-letter-spacing, 0);
  text-transform: var(--job-title-text-transform, none);
  line-height: var(--job-title-line-height, 1.3);
  margin: 0;
}

.entry-meta {
  font-size: var(--small-font-size, 14px);
  color: var(--text-secondary, #475569);
  margin: 0;
}

.entry-company {
  font-size: var(--org-name-font-size, 16px);
  font-weight: var(--org-name-font-weight, 500);
  color: var(--org-name-color, var(--text-secondary, #475569));
  font-style: var(--org-name-font-style, normal);
}

.entry-date {
  font-size: var(--date-line-font-size-custom, var(--tiny-font-size, 12px));
  font-weight: var(--date-line-font-weight, 400);
  color: var(--date-line-color, var(--text-secondary, #475569));
  font-style: var(--date-line-font-style, normal);
  text-align: var(--date-line-alignment, left);
  font-synthesis: none;
}

.entry-location {
  font-size: var(--tiny-font-size, 12px);
  color: var(--text-secondary, #475569);
}

.entry-description {
  font-size: var(--small-font-size, 14px);
  color: var(--on-background-color, #0f172a);
  margin-bottom: 0.5rem;
}

.entry-description p {
  margin: 0 0 0.5rem 0;
}

.entry-description p:last-child {
  margin-bottom: 0;
}

.entry-bullets {
  list-style-type: disc;
  margin-left: var(--bullet-level1-indent, 1.5rem);
  padding-left: 0;
  font-size: var(--small-font-size, 14px);
  color: var(--on-background-color, #0f172a);
}

.entry-bullets li {
  margin-bottom: 0.25rem;
}

.entry-bullets li::marker {
  color: var(--bullet-level1-color, var(--primary-color, #2563eb));
}

.entry-bullet-bridge .entry-bullets li:last-child {
  margin-bottom: 0.25rem;
}

/* Skills */
.skill-category {
  margin-bottom: 0.75rem;
}

.skill-category-name {
  font-family: var(--heading-font-family, Georgia), serif;
  font-size: var(--small-font-size, 14px);
  font-weight: 600;
  color: var(--text-color, #0f172a);
}

.skill-list,
.skill-item {
  font-size: var(--small-font-size, 14px);
  color: var(--text-color, #0f172a);
}

.skill-item {
  margin-bottom: 0.25rem;
}

.skill-category-block {
  margin-bottom: 1rem;
}

.skill-category-title {
  font-family: var(--heading-font-family, Georgia), serif;
  font-size: var(--small-font-size, 14px);
  font-weight: 600;
  color: var(--on-secondary-color, #4a3d2a);
  margin-bottom: 0.5rem;
}

.skill-tags {
  display: flex;
  flex-wrap: wrap;
  gap: var(--tag-gap, 0.25rem);
}

.skill-tag {
  display: inline-block;
  padding: var(--tag-padding, 0.25rem 0.625rem);
  font-family: var(--heading-font-family, Georgia), serif;
  font-size: var(--tag-font-size-custom, var(--tag-font-size, 0.75rem));
  font-weight: var(--tag-font-weight, 500);
  background-color: var(--tag-bg-color, rgba(184, 177, 157, 0.72));
  color: var(--tag-text-color, #ffffff);
  border-radius: var(--tag-border-radius, 4em);
  line-height: 1.4;
  -webkit-print-color-adjust: exact !important;
  print-color-adjust: exact !important;
}

.skill-inline {
  font-family: var(--font-family, Georgia), serif;
  font-size: var(--tag-font-size-custom, var(--small-font-size, 14px));
  color: var(--on-secondary-color, #4a3d2a);
}

.content-text {
  font-size: var(--body-font-size, 16px);
  color: var(--on-background-color, #0f172a);
  margin-bottom: 0.5rem;
  line-height: var(--body-line-height, 1.6);
}

/* Sidebar overrides */
.sidebar .section-content {
  font-size: var(--small-font-size, 14px);
}

.sidebar .entry-title {
  font-size: var(--small-font-size, 14px);
  font-weight: 600;
}

.sidebar .entry-company,
.sidebar .entry-meta {
  font-size: var(--tiny-font-size, 12px);
}

.sidebar,
.sidebar .section-content,
.sidebar .entry-title,
.sidebar .entry-company,
.sidebar .entry-description,
.sidebar .skill-category-name,
.sidebar .skill-category-title,
.sidebar .skill-list,
.sidebar .skill-item,
.sidebar .content-text {
  color: var(--on-secondary-color, #4a3d2a);
}

.sidebar .entry-bullets {
  margin-left: 1rem;
}

.sidebar .skill-tags {
  max-width: 100%;
}

.sidebar .skill-tag {
  max-width: 100%;
  overflow: hidden;
  text-overflow: ellipsis;
}
"""


def advanced_effects_css() -> str:
    """Optional shadows and transitions, driven by variables and off in print."""
    return """
/* Advanced effects */
.skill-tag {
  box-shadow: var(--shadow-default, none);
  transition: box-shadow var(--animation-duration, 0s) ease,
              transform var(--animation-duration, 0s) ease;
}

.entry {
  transition: box-shadow var(--animation-duration, 0s) ease;
}

@media screen {
  .skill-tag:hover,
  .entry:hover {
    box-shadow: var(--shadow-hover, none);
  }

  a {
    transition: color var(--animation-duration, 0s) ease;
  }
}

@media print {
  .skill-tag,
  .entry {
    box-shadow: none !important;
    transform: none !important;
    transition: none !important;
  }
}
"""
